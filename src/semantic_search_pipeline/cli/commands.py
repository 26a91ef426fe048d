"""
CLI commands - entry points for ingestion and querying.

Each command follows a consistent pattern:
1. Parse arguments
2. Load environment and configure logging
3. Open the vector store for the whole run
4. Run the pipeline
5. Return exit code

Pipeline errors are fatal: they are logged and the command returns 1.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from semantic_search_pipeline.config import PipelineConfig, get_config
from semantic_search_pipeline.core.errors import ConfigurationError, PipelineError

logger = logging.getLogger(__name__)


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _setup_logging(config: PipelineConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _prepare() -> PipelineConfig | None:
    """Load env and config, then configure logging. None if the config is invalid."""
    _load_env()
    try:
        config = get_config()
    except ConfigurationError as e:
        logging.basicConfig()
        logger.error(f"Invalid configuration: {e}")
        return None
    _setup_logging(config)
    return config


def _open_store(config: PipelineConfig, reset: bool = False):
    from semantic_search_pipeline.retrieval import get_vector_store

    return get_vector_store(config, pre_delete_table=reset)


def run_ingest_cli(argv: list[str] | None = None) -> int:
    """CLI entry point for directory ingestion."""
    from semantic_search_pipeline.pipelines import ingest_all

    parser = argparse.ArgumentParser(description="Embed every file in a directory")
    parser.add_argument(
        "root",
        nargs="?",
        help="Directory to ingest (default: SOURCE_DIR)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate the embeddings table first",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip files that fail instead of aborting",
    )
    args = parser.parse_args(argv)

    config = _prepare()
    if config is None:
        return 1
    root = args.root or config.source_dir

    try:
        with _open_store(config, reset=args.reset) as store:
            report = ingest_all(
                root,
                store,
                mode=config.embedding_mode,
                continue_on_error=args.keep_going,
            )
    except PipelineError as e:
        logger.error(f"Ingestion failed: {e}")
        return 1

    for path, error in report.failed:
        print(f"  [FAIL] {path}: {error}")

    if not report.all_succeeded:
        print(f"\nLoaded {len(report.ingested)}/{report.total} file(s)")
        return 1

    print("data successfully loaded into vector store")
    return 0


def run_query_cli(argv: list[str] | None = None) -> int:
    """CLI entry point for the interactive query loop."""
    from semantic_search_pipeline.pipelines import run_query_loop

    parser = argparse.ArgumentParser(description="Interactive similarity search")
    parser.add_argument(
        "-k",
        type=int,
        help="Number of results per query (default: SEARCH_K)",
    )
    args = parser.parse_args(argv)

    if args.k is not None and args.k <= 0:
        parser.error("-k must be a positive integer")

    config = _prepare()
    if config is None:
        return 1
    k = args.k if args.k is not None else config.search_k

    try:
        with _open_store(config) as store:
            run_query_loop(store, mode=config.embedding_mode, k=k)
    except PipelineError as e:
        logger.error(f"Query failed: {e}")
        return 1

    return 0


def ingest_main() -> int:
    """Console script wrapper for run_ingest_cli."""
    try:
        return run_ingest_cli()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


def query_main() -> int:
    """Console script wrapper for run_query_cli."""
    try:
        return run_query_cli()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        semantic-search ingest [root]   # Load a directory into the store
        semantic-search query [-k N]    # Interactive search
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="Image/text semantic search over pgvector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  ingest      Embed every file under a directory and store it
  query       Read queries from stdin and print nearest neighbors

Examples:
  semantic-search ingest sample_images --reset
  EMBEDDING_MODE=text semantic-search query -k 3
        """,
    )

    parser.add_argument(
        "command",
        choices=["ingest", "query"],
        help="Pipeline to run",
    )

    args, remaining = parser.parse_known_args()

    commands = {
        "ingest": run_ingest_cli,
        "query": run_query_cli,
    }

    try:
        return commands[args.command](remaining)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
