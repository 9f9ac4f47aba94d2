#!/usr/bin/env python3
"""
Scramble Scorecard System - Main Entry Point.

Interprets OCR output for a set of scramble scorecard photos, scores
every team under the event's format, ranks the event and writes the
results.

Usage:
    Command Line:
        python main.py --input card.json --format straight
        python main.py --input ./cards/ --format champagne --output results.xlsx

    Python:
        from main import run_event
        results = run_event("cards/", "straight")

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, List, Dict, Any

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from scramble.utils.logger import setup_logger_from_config, get_logger, set_level
from scramble.utils.exceptions import (
    ScrambleError,
    InputError,
    OCRError,
    OCRProcessingError,
    NoPlayersDetectedError,
    FileNotFoundError as PayloadFileNotFoundError
)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Scramble Scorecard Interpretation and Scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Score one scorecard:
        python main.py --input card.json --format straight

    Score an event directory to Excel:
        python main.py --input ./cards/ --format champagne --output results.xlsx

    Nine-hole event:
        python main.py --input ./cards/ --format straight --holes 9
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="OCR payload JSON file, or directory of payload files"
    )

    parser.add_argument(
        "--format", "-f",
        dest="scramble_format",
        choices=["straight", "champagne"],
        default="straight",
        help="Scoring format (default: straight)"
    )

    parser.add_argument(
        "--holes",
        type=int,
        default=None,
        help="Event hole count, used when a scorecard shows none"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default="outputs/scramble_results.json",
        help="Output file, .json or .xlsx (default: outputs/scramble_results.json)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)
    logger = setup_logger_from_config()

    if args.debug:
        set_level("DEBUG")
    elif args.quiet:
        set_level("WARNING")

    logger.info("=" * 60)
    logger.info("SCRAMBLE SCORECARD SYSTEM")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Input: {args.input}")
    logger.info(f"Format: {args.scramble_format}")
    logger.info(f"Output: {args.output}")

    return config


def collect_payloads(input_path: str) -> List[Path]:
    """
    List the payload files to process.

    Raises:
        FileNotFoundError: If the input path doesn't exist.
        InputError: If a single input file is not JSON.
    """
    logger = get_logger(__name__)
    path = Path(input_path)

    if not path.exists():
        raise PayloadFileNotFoundError(str(path))

    if path.is_file():
        if path.suffix.lower() != '.json':
            raise InputError(f"Unsupported payload file: {path.name}", {'path': str(path)})
        return [path]

    files = sorted(p for p in path.iterdir() if p.suffix.lower() == '.json')
    if not files:
        logger.warning(f"No payload files found in: {path}")
    else:
        logger.info(f"Found {len(files)} payload files")
    return files


def run_event(
    input_path: str,
    scramble_format: str,
    output_path: Optional[str] = None,
    hole_count: Optional[int] = None,
    config_path: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Score and rank every scorecard of an event.

    Scorecards that cannot be read, or that yield no players, are logged
    and skipped so the rest of the event can still be ranked. Ranking
    runs only after every team has been scored.

    Args:
        input_path: Payload file or directory.
        scramble_format: "straight" or "champagne".
        output_path: Where to write results (.json or .xlsx). None skips writing.
        hole_count: Event hole count, used when a scorecard shows none.
        config_path: Optional custom configuration file path.

    Returns:
        Team dictionaries with their rank, in processing order.

    Example:
        >>> results = run_event("cards/", "straight")
        >>> results[0]['rank']
        1
    """
    logger = get_logger(__name__)
    ConfigurationManager(config_path)

    from scramble.ocr_engine import OCRPayload
    from scramble.postprocessor import ScorecardProcessor
    from scramble.scoring import apply_rankings
    from scramble.output_handler import OutputHandler

    processor = ScorecardProcessor()
    records = []

    for team_id, file_path in enumerate(collect_payloads(input_path), 1):
        logger.info(f"Processing: {file_path.name}")
        try:
            payload = OCRPayload.load(file_path)
            records.append(
                processor.process(
                    payload,
                    scramble_format,
                    team_id=team_id,
                    default_hole_count=hole_count
                )
            )
        except OCRError as e:
            logger.error(f"Skipping {file_path.name}: {e}. {OCRProcessingError.USER_MESSAGE}")
        except (InputError, NoPlayersDetectedError) as e:
            logger.error(f"Skipping {file_path.name}: {e}")

    ranked = []
    for record, entry in zip(records, apply_rankings(r.score for r in records)):
        logger.info(f"  {entry.display_rank}: {record.team_name} ({record.score.metric})")
        ranked.append((record, entry.rank))

    if output_path and ranked:
        written = OutputHandler().save(ranked, output_path)
        logger.info(f"Results written: {written}")

    return [record.to_dict(rank=rank) for record, rank in ranked]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        args = parse_arguments(argv)
        initialize_system(args)
        logger = get_logger(__name__)

        results = run_event(
            input_path=args.input,
            scramble_format=args.scramble_format,
            output_path=args.output,
            hole_count=args.holes,
            config_path=args.config
        )

        if not results:
            logger.error("No scorecards could be scored")
            return 1

        logger.info("=" * 60)
        logger.info(f"Event complete. Ranked {len(results)} teams.")
        logger.info("=" * 60)
        return 0

    except ScrambleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
