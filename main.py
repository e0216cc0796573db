"""
SwipeMatch - Gesture Typing Word Recognizer

Entry point for the application.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SwipeMatch - Gesture Typing Word Recognizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--words",
        type=Path,
        default=None,
        help="Line-delimited word list (overrides config)",
    )

    parser.add_argument(
        "--layout",
        choices=["qwerty", "dvorak", "colemak"],
        default=None,
        help="Keyboard layout (overrides config)",
    )

    parser.add_argument(
        "-k",
        type=int,
        default=None,
        help="Number of candidates to show (overrides config)",
    )

    parser.add_argument(
        "--pruning",
        choices=["none", "endpoint", "cumulative", "combined"],
        default=None,
        help="DTW pruning strategy (overrides config)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads to shard the dictionary scan over (overrides config)",
    )

    parser.add_argument(
        "--points",
        type=str,
        default=None,
        help='Drawn path as "x,y x,y ..."',
    )

    parser.add_argument(
        "--screen",
        type=str,
        default=None,
        help="Widget size WIDTHxHEIGHT; --points are then absolute coordinates",
    )

    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Check whether a typed word is in the word list",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging of scan statistics",
    )

    return parser.parse_args(argv)


def parse_points(text):
    """Parse 'x,y x,y ...' into a list of float tuples."""
    points = []
    for pair in text.split():
        x, y = pair.split(",")
        points.append((float(x), float(y)))
    return points


def parse_screen(text):
    """Parse 'WIDTHxHEIGHT' into two floats."""
    width, height = text.lower().split("x")
    return float(width), float(height)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from keylayout import default_layout
    from prediction import (
        Recognizer,
        RecognitionError,
        contains,
        load_config,
        load_word_list,
        to_relative,
    )

    # Load config
    config = load_config(args.config)

    # Apply CLI overrides
    if args.words:
        config.dictionary.path = str(args.words)
    if args.layout:
        config.keyboard.layout = args.layout
    if args.k is not None:
        config.recognition.k = args.k
    if args.pruning:
        config.recognition.pruning = args.pruning
    if args.workers is not None:
        config.recognition.workers = args.workers

    try:
        words = load_word_list(config.dictionary.path)

        if args.search is not None:
            found = contains(args.search, words)
            print(f"{args.search}: {'Yes' if found else 'No'}")
            return 0 if found else 1

        if args.points is None:
            print("ERROR: nothing to do, pass --points or --search")
            return 2

        points = parse_points(args.points)
        if args.screen:
            width, height = parse_screen(args.screen)
            points = to_relative(points, width, height, config.keyboard.y_scale)

        layout = default_layout(config.keyboard.layout, y_scale=config.keyboard.y_scale)
        recognizer = Recognizer(words, layout, config.recognition)
        candidates = recognizer.recognize(points)
    except RecognitionError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"SwipeMatch ({config.keyboard.layout}, {len(words)} words, "
          f"pruning={config.recognition.pruning})")
    for rank, candidate in enumerate(candidates, start=1):
        print(f"  {rank}. {candidate.word:<20} {candidate.distance:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
