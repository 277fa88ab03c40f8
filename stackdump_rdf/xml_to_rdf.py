"""
Convert a StackExchange XML dump (Badges, Comments, Posts, PostHistory,
PostLinks, Tags, Users) into a single gzip-compressed N-Triples file.
"""

import argparse
import logging
import os
import sys
from contextlib import closing

from tqdm.auto import tqdm

from . import config
from .errors import ConversionError
from .mappers import EntityKind, get_mapper
from .ntriples import NTriplesWriter
from .reader import iter_rows

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Converter Class
# ----------------------------------------------------------------------
class DumpToRDFConverter:
    """Main converter: streams every dump file through its mapper into one output."""

    def __init__(self, input_dir: str, output_file: str, progress_every: int = config.PROGRESS_EVERY):
        self.input_dir = input_dir
        self.output_file = output_file
        self.progress_every = progress_every

        # Statistics
        self.stats = {
            label: {"records": 0, "statements": 0} for label, _ in config.INPUT_FILES
        }

    # ------------------------------------------------------------------
    # Main processing
    # ------------------------------------------------------------------
    def process_all_xml(self) -> dict:
        """Run all seven kinds in their fixed order; any error aborts the run."""
        files = [(EntityKind(label), os.path.join(self.input_dir, fname))
                 for label, fname in config.INPUT_FILES]
        with NTriplesWriter(self.output_file) as writer:
            for kind, xml_path in tqdm(files, desc="Converting dump files...",
                                       disable=not config.progress_enabled()):
                self.process_xml_file(kind, xml_path, writer)
        return self.stats

    def process_xml_file(self, kind: EntityKind, xml_path: str, writer: NTriplesWriter):
        """Map every record of one dump file and write its statements."""
        name = kind.value
        mapper = get_mapper(kind)
        stats = self.stats[name]
        logger.info(f"{name}: started")

        count = 0
        with closing(iter_rows(xml_path)) as rows:
            for pairs in rows:
                stats["statements"] += writer.write_all(mapper.map_row(pairs))
                count += 1
                if count % self.progress_every == 0:
                    logger.info(f"{name}: count: {count}")

        stats["records"] = count
        logger.info(f"{name}: count: {count}")
        logger.info(f"{name}: finished")

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def log_statistics(self):
        """Log per-kind and total record and statement counts."""
        logger.info("=" * 60)
        logger.info("STATISTICS")
        logger.info("=" * 60)
        for name, stats in self.stats.items():
            logger.info(f"  {name:<12} records: {stats['records']:>12}  statements: {stats['statements']:>14}")
        total_records = sum(s["records"] for s in self.stats.values())
        total_statements = sum(s["statements"] for s in self.stats.values())
        logger.info(f"  {'Total':<12} records: {total_records:>12}  statements: {total_statements:>14}")
        logger.info("=" * 60)


def convert(input_dir: str, output_file: str) -> dict:
    """Convert a dump directory into one compressed N-Triples file; return the statistics."""
    converter = DumpToRDFConverter(input_dir, output_file)
    stats = converter.process_all_xml()
    converter.log_statistics()
    return stats


# ----------------------------------------------------------------------
# Command line entry point
# ----------------------------------------------------------------------
def setup_logging():
    level = config.get_log_level()
    logging.basicConfig(
        level=level,
        format="[%(asctime)s %(levelname)s %(name)s] %(message)s",
        stream=sys.stderr,
    )
    requested = os.environ.get(config.LOG_LEVEL_ENV)
    if requested and requested.strip().upper() != level:
        logger.warning(f"Unknown log level {requested!r} in {config.LOG_LEVEL_ENV}, using {level}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Convert a StackExchange XML dump to gzipped N-Triples.")
    parser.add_argument("xml_directory", help="Directory containing Badges.xml, Comments.xml, ... Users.xml")
    parser.add_argument("output_file", help="Output file, e.g. output.nt.gz")
    args = parser.parse_args(argv)

    setup_logging()
    try:
        convert(args.xml_directory, args.output_file)
    except ConversionError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
