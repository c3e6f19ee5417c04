import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .handlers.registry import default_registry
from .mime.resolver import TypeResolver
from .probing.probe import DERIVE, FileProbe


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Logs to stderr (stdout carries the JSON output) and optionally to a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Probe files and print their properties as JSON lines")

    p.add_argument("paths", type=Path, nargs="+", help="Files to probe")

    ext_group = p.add_mutually_exclusive_group()
    ext_group.add_argument("--ext", default=DERIVE, help="Extension to assume instead of the one in the path")
    ext_group.add_argument("--no-ext", action="store_true", help="Ignore the file extension entirely")

    p.add_argument("--hash-only", action="store_true", help="Only print the base-36 SHA-1")
    p.add_argument("--timestamp", action="store_true", help="Include the last-modified timestamp")
    p.add_argument("--progress", action="store_true", help="Show a progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")

    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    ext = None if args.no_ext else args.ext
    # One resolver and registry for the whole run; probes never mutate them
    resolver = TypeResolver()
    handlers = default_registry()

    missing = 0
    paths = tqdm(args.paths, desc="Probing", file=sys.stderr) if args.progress else args.paths
    for path in paths:
        probe = FileProbe(path, resolver=resolver, handlers=handlers)

        if args.hash_only:
            sha1 = probe.sha1_base36()
            if sha1 is None:
                missing += 1
            out = {'path': str(path), 'sha1': sha1 or ''}
        else:
            out = {'path': str(path)}
            out.update(probe.properties(ext))
            if not out['fileExists']:
                missing += 1
                logging.warning(f"File not found: {path}")
            if args.timestamp:
                out['timestamp'] = probe.modified_at() if out['fileExists'] else None

        print(json.dumps(out, default=str))

    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
