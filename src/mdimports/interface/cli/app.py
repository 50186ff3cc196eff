from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
persistent file and CLI overrides), logging bootstrap, import processing
and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from mdimports.core.config_validator import validate_config
from mdimports.core.resolution.processor import process_file
from mdimports.domain.config import get_default_config, load_config
from mdimports.domain.errors import FileSystemFailureError
from mdimports.infra.fs import normalize_path
from mdimports.infra.logging import LoggingConfig, configure_logging, get_logger
from mdimports.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    if not args.input_path:
        parser.error("the following arguments are required: input_path")

    input_path = normalize_path(args.input_path, fallback=os.getcwd())
    if not os.path.isfile(input_path):
        msg = f"Input document does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Import processing phase
    logger.debug(f"Processing document: {input_path}")
    try:
        content = process_file(
            input_path,
            clean_conf["imports_enabled"],
            max_depth=clean_conf["max_depth"],
        )
    except FileSystemFailureError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Import processing failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        rendered = json.dumps({
            "source": input_path,
            "content": content,
            "imports_enabled": clean_conf["imports_enabled"],
            "max_depth": clean_conf["max_depth"],
        }, ensure_ascii=False, indent=2)
    else:
        rendered = content

    if args.output_path:
        out_path = normalize_path(args.output_path, fallback=os.getcwd())
        try:
            os.makedirs(os.path.dirname(out_path), exist_ok=True)
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            logger.error(f"Cannot write output file {out_path}: {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        logger.info(f"Processed document written to {out_path}")
    else:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys are merged, preventing schema pollution.
    """
    out = dict(base)
    for k in ("imports_enabled", "max_depth", "log_level", "log_file"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
