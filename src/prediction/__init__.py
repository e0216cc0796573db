"""
SwipeMatch Prediction Module

Gesture-to-word matching with banded, pruned DTW.
"""
from .config import Config, RecognitionConfig, load_config
from .dictionary import load_word_list
from .dtw import dtw, endpoint_bound, get_strategy
from .engine import Recognizer, ScanStats, contains, recognize
from .errors import (
    EmptyQuery,
    InvalidParameter,
    NoPath,
    NotInitialized,
    RecognitionCancelled,
    RecognitionError,
)
from .paths import distance, point_density, resample, to_relative
from .topk import Candidate, TopKTracker
from .word_path import LazyPathSource, PrecomputedPathSource, WordPath

__all__ = [
    'Config',
    'RecognitionConfig',
    'load_config',
    'load_word_list',
    'dtw',
    'endpoint_bound',
    'get_strategy',
    'Recognizer',
    'ScanStats',
    'contains',
    'recognize',
    'EmptyQuery',
    'InvalidParameter',
    'NoPath',
    'NotInitialized',
    'RecognitionCancelled',
    'RecognitionError',
    'distance',
    'point_density',
    'resample',
    'to_relative',
    'Candidate',
    'TopKTracker',
    'LazyPathSource',
    'PrecomputedPathSource',
    'WordPath',
]
