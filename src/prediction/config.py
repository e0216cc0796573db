"""
Config loader for SwipeMatch.
Reads keyboard, recognition and dictionary settings from YAML into dataclasses.
"""
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional
import yaml

from .errors import InvalidParameter

PRUNING_CHOICES = ("none", "endpoint", "cumulative", "combined")
PATH_CACHE_CHOICES = ("lazy", "precomputed")


@dataclass
class KeyboardConfig:
    layout: str = "qwerty"
    y_scale: float = 0.4          # Flattens rows so vertical travel is not over-weighted


@dataclass
class RecognitionConfig:
    k: int = 7
    window_fraction: float = 0.1  # Sakoe-Chiba half-width as a fraction of query length
    pruning: str = "combined"     # "none", "endpoint", "cumulative" or "combined"

    # Word path generation
    path_cache: str = "lazy"      # "lazy" (per query density) or "precomputed"
    cache_density: Optional[float] = None  # Point spacing for precomputed paths, None = raw

    workers: int = 1              # >1 shards the dictionary over a thread pool

    def validate(self) -> "RecognitionConfig":
        if self.k <= 0:
            raise InvalidParameter(f"k must be positive, got {self.k}")
        if self.window_fraction < 0:
            raise InvalidParameter(
                f"window_fraction must be >= 0, got {self.window_fraction}"
            )
        if self.pruning not in PRUNING_CHOICES:
            raise InvalidParameter(f"Unknown pruning strategy {self.pruning!r}")
        if self.path_cache not in PATH_CACHE_CHOICES:
            raise InvalidParameter(f"Unknown path cache mode {self.path_cache!r}")
        if self.workers < 1:
            raise InvalidParameter(f"workers must be >= 1, got {self.workers}")
        return self


@dataclass
class DictionaryConfig:
    path: str = "word_list.txt"


@dataclass
class Config:
    keyboard: KeyboardConfig = field(default_factory=KeyboardConfig)
    recognition: RecognitionConfig = field(default_factory=RecognitionConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)


def _section(cls, section):
    """Build one config section from its YAML mapping; keys it does not know are dropped."""
    if section is None:
        return cls()
    if not isinstance(section, dict):
        raise InvalidParameter(
            f"Config section for {cls.__name__} must be a mapping, got {section!r}"
        )
    known = {f.name for f in fields(cls)}
    return cls(**{key: value for key, value in section.items() if key in known})


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Read the keyboard, recognition and dictionary sections from YAML.

    Missing sections or keys keep their defaults and unknown keys are
    ignored. The recognition section is validated before returning.

    Args:
        config_path: YAML file to read. None means config.yaml at the
                    project root; a path that does not exist gives defaults.

    Raises:
        InvalidParameter: a section is not a mapping or a recognition
            value is out of range.
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"

    config_path = Path(config_path)

    if not config_path.exists():
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidParameter(f"Config file {config_path} must hold a mapping")

    config = Config(
        keyboard=_section(KeyboardConfig, data.get('keyboard')),
        recognition=_section(RecognitionConfig, data.get('recognition')),
        dictionary=_section(DictionaryConfig, data.get('dictionary')),
    )
    config.recognition.validate()
    return config
