import logging
from pathlib import Path
from typing import List

import pandas as pd

from sorare_cards.api.models import Card, ReportRow, ReportVariant
from sorare_cards.exceptions import ReportWriteError
from sorare_cards.interfaces.exporter import IExporter

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("UserCards.xlsx")
DEFAULT_SHEET_NAME = "User Cards"


class ExcelExporter(IExporter):
    """
    Excel exporter for report rows.

    Writes a single sheet: the variant's header row followed by one row per
    (user, card) pair, in the order given. The whole workbook is written in
    one go and replaces any existing file at the output path.
    """

    ENGINE = "openpyxl"

    def __init__(
        self,
        variant: ReportVariant = ReportVariant.EXTENDED,
        sheet_name: str = DEFAULT_SHEET_NAME,
    ):
        self._variant = variant
        self._sheet_name = sheet_name

    @property
    def columns(self) -> List[str]:
        return list(self._variant.columns)

    def to_dataframe(self, rows: List[ReportRow]) -> pd.DataFrame:
        """Build the report table; an empty row list still carries the header."""
        records = [row.to_row(self._variant) for row in rows]
        return pd.DataFrame(records, columns=self.columns)

    def export(self, rows: List[ReportRow], output_path: Path) -> None:
        """Export rows to an .xlsx file. Raises ReportWriteError on failure."""
        output_path = Path(output_path)
        df = self.to_dataframe(rows)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            df.to_excel(
                output_path,
                sheet_name=self._sheet_name,
                index=False,
                engine=self.ENGINE,
            )
        except (OSError, ValueError) as e:
            # openpyxl rejects control characters with a ValueError subclass
            raise ReportWriteError(f"Cannot save report to {output_path}: {e}") from e

        logger.info(f"Wrote {len(df)} rows to {output_path}")

    def read_rows(self, path: Path) -> List[ReportRow]:
        """Read a report written by export() back into rows."""
        path = Path(path)
        try:
            df = pd.read_excel(
                path, sheet_name=self._sheet_name, dtype=object, engine=self.ENGINE
            )
        except (OSError, ValueError) as e:
            raise ReportWriteError(f"Cannot read report {path}: {e}") from e

        if list(df.columns) != self.columns:
            raise ReportWriteError(
                f"Unexpected header in {path}: {list(df.columns)} (expected {self.columns})"
            )

        # Empty cells come back as NaN
        df = df.astype(object).where(pd.notna(df), None)

        return [
            ReportRow(user_slug=values[0], card=Card.from_row(values[1:]))
            for values in df.itertuples(index=False, name=None)
        ]
