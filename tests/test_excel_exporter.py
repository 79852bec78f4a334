import tempfile
from pathlib import Path
from unittest import TestCase

import pandas as pd

from sorare_cards.api.models import Card, ReportRow, ReportVariant
from sorare_cards.exceptions import ReportWriteError
from sorare_cards.exporters.excel_exporter import DEFAULT_SHEET_NAME, ExcelExporter
from tests.helpers import card_node


def sample_rows():
    return [
        ReportRow("alice", Card.from_api_response(card_node(1))),
        ReportRow("alice", Card.from_api_response(card_node(2, name=None, priceEUR=None))),
        ReportRow("bob", Card.from_api_response(card_node(3, position="Goalkeeper"))),
    ]


class TestExcelExporter(TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.path = self.dir / "UserCards.xlsx"

    def tearDown(self):
        self._tmp.cleanup()

    def test_extended_header_and_rows(self):
        ExcelExporter().export(sample_rows(), self.path)

        df = pd.read_excel(self.path, sheet_name=DEFAULT_SHEET_NAME, dtype=object)
        self.assertEqual(
            list(df.columns),
            ["UserSlug", "AssetID", "CardSlug", "Name", "Position", "PriceEUR", "OnSale"],
        )
        self.assertEqual(len(df), 3)
        self.assertEqual(list(df["UserSlug"]), ["alice", "alice", "bob"])
        self.assertEqual(list(df["AssetID"]), ["0x0001", "0x0002", "0x0003"])
        self.assertEqual(df.iloc[2]["Position"], "Goalkeeper")

    def test_basic_header(self):
        ExcelExporter(variant=ReportVariant.BASIC).export(sample_rows(), self.path)

        df = pd.read_excel(self.path, sheet_name=DEFAULT_SHEET_NAME)
        self.assertEqual(list(df.columns), ["UserSlug", "AssetID", "CardSlug"])
        self.assertEqual(len(df), 3)

    def test_zero_rows_still_writes_header(self):
        for variant in ReportVariant:
            ExcelExporter(variant=variant).export([], self.path)

            df = pd.read_excel(self.path, sheet_name=DEFAULT_SHEET_NAME)
            self.assertEqual(list(df.columns), list(variant.columns))
            self.assertEqual(len(df), 0)

    def test_single_sheet(self):
        ExcelExporter().export(sample_rows(), self.path)

        sheets = pd.read_excel(self.path, sheet_name=None)
        self.assertEqual(list(sheets), [DEFAULT_SHEET_NAME])

    def test_existing_file_overwritten(self):
        exporter = ExcelExporter()
        exporter.export(sample_rows(), self.path)
        exporter.export(sample_rows()[:1], self.path)

        self.assertEqual(len(exporter.read_rows(self.path)), 1)

    def test_creates_parent_directory(self):
        path = self.dir / "out" / "nested" / "cards.xlsx"

        ExcelExporter().export(sample_rows(), path)

        self.assertTrue(path.exists())

    def test_round_trip_reconstructs_rows(self):
        exporter = ExcelExporter()
        rows = sample_rows()

        exporter.export(rows, self.path)

        self.assertEqual(exporter.read_rows(self.path), rows)

    def test_round_trip_basic_variant(self):
        exporter = ExcelExporter(variant=ReportVariant.BASIC)

        exporter.export(sample_rows(), self.path)

        expected = [
            ReportRow(row.user_slug, Card(row.card.asset_id, row.card.slug))
            for row in sample_rows()
        ]
        self.assertEqual(exporter.read_rows(self.path), expected)

    def test_unwritable_path_is_fatal(self):
        blocker = self.dir / "blocker"
        blocker.write_text("not a directory")

        with self.assertRaises(ReportWriteError):
            ExcelExporter().export(sample_rows(), blocker / "cards.xlsx")

    def test_control_character_in_field_is_fatal_write_error(self):
        rows = [ReportRow("alice", Card.from_api_response(card_node(1, name="Bad\x01Name")))]

        with self.assertRaises(ReportWriteError):
            ExcelExporter().export(rows, self.path)

    def test_read_rejects_other_variant(self):
        ExcelExporter(variant=ReportVariant.BASIC).export(sample_rows(), self.path)

        with self.assertRaises(ReportWriteError):
            ExcelExporter().read_rows(self.path)

    def test_read_missing_file(self):
        with self.assertRaises(ReportWriteError):
            ExcelExporter().read_rows(self.dir / "missing.xlsx")
