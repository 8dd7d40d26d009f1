"""Line-table reader producing the record feed for the graph builder."""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from metro_network.network.models import EdgeRow, LineBegin, LoadConfig

logger = logging.getLogger(__name__)

_CELL_SPLIT = re.compile(r"\t+")


class LineTableReader:
    """Read a metro line-table file into LineBegin / EdgeRow records.

    The file holds one block per line::

        1号线站点间距
        站点名称\t间距（KM）

        汉口北---滠口新区\t2.1
        滠口新区---滕子岗\t1.4
    """

    def __init__(self, config: LoadConfig) -> None:
        """Initialize reader with a load configuration."""
        self.config = config
        self.path = Path(config.input_path)
        if not self.path.is_file():
            raise FileNotFoundError(f"Line table not found: {config.input_path}")

        self.lines_seen = 0
        self.rows_read = 0
        self.rows_skipped = 0

    def read_records(self) -> list[LineBegin | EdgeRow]:
        """Read the whole file."""
        logger.info(f"Reading line tables from {self.path}")
        with open(self.path, encoding=self.config.encoding) as f:
            records = list(self.parse(f))
        logger.info(
            f"Loaded {self.lines_seen} lines, {self.rows_read} station pairs "
            f"({self.rows_skipped} rows skipped)"
        )
        return records

    def parse(self, lines: Iterable[str]) -> Iterator[LineBegin | EdgeRow]:
        """Yield records from raw text lines."""
        raw = iter(lines)
        for text in raw:
            text = text.strip()
            if not text:
                continue

            if self.config.line_marker in text:
                line_name = text.split(self.config.line_marker)[0].strip()
                self.lines_seen += 1
                # Column header and blank separator
                for _ in range(self.config.header_lines):
                    next(raw, None)
                yield LineBegin(line_name)
                continue

            row = self.parse_row(text)
            if row is None:
                self.rows_skipped += 1
                logger.debug(f"Skipping row without a station pair: {text!r}")
                continue
            self.rows_read += 1
            yield row

    def parse_row(self, text: str) -> EdgeRow | None:
        """Split "A---B<TAB>distance" into an EdgeRow, None for other shapes."""
        cells = _CELL_SPLIT.split(text)
        if len(cells) < 2:
            return None
        stations = cells[0].split(self.config.station_separator)
        if len(stations) != 2:
            return None
        return EdgeRow(stations[0].strip(), stations[1].strip(), cells[1].strip())
