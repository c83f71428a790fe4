"""Command-line interface for map generation."""

import argparse
import logging
import time
import tomllib
from pathlib import Path

import structlog


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for map generation."""
    parser = argparse.ArgumentParser(
        description="Generate a fantasy map terrain description from a seed"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a map TOML config file",
    )
    parser.add_argument(
        "--seed", type=float, default=None, help="Seed in [0, 1) (overrides config)"
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Map width in tiles (overrides config)"
    )
    parser.add_argument(
        "--height", type=int, default=None, help="Map height in tiles (overrides config)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="maps/map.npz",
        help="Output path (default: maps/map.npz)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from ..exceptions import MapError
    from .config import MapConfig
    from .generator import generate_map
    from .persistence import save_map

    try:
        if args.config:
            config_path = find_config(args.config)
            config = load_config(config_path)
            logger.info("config_loaded", path=str(config_path))
        else:
            config = MapConfig()
            logger.info("using_default_config")
    except FileNotFoundError as e:
        logger.error("config_not_found", error=str(e))
        raise SystemExit(1)
    except (MapError, tomllib.TOMLDecodeError) as e:
        logger.error("config_invalid", error=str(e))
        raise SystemExit(1)

    overrides = {
        key: value
        for key, value in (("seed", args.seed), ("width", args.width), ("height", args.height))
        if value is not None
    }
    if overrides:
        config = config.model_copy(update=overrides)

    output_path = Path(args.output)

    print(f"Generating {config.width}x{config.height} map with seed {config.seed}")
    print(f"Output: {output_path}")
    print()

    start_time = time.time()
    try:
        result = generate_map(config)
    except MapError as e:
        logger.error("generation_failed", error=str(e), error_type=type(e).__name__)
        raise SystemExit(1)
    gen_time = time.time() - start_time

    print()
    print(f"Generation complete in {gen_time:.2f}s")
    print(f"  tiles:       {result.grid.width * result.grid.height}")
    print(f"  towns:       {len(result.towns)}")
    print(f"  roads:       {len(result.roads)}")
    print(f"  coastline:   {len(result.coastline)}")
    print(f"  decorations: {len(result.decorations)}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    saved_path = save_map(output_path, result)

    print(f"Saved to {saved_path}")


if __name__ == "__main__":
    main()
