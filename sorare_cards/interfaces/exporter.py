from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from sorare_cards.api.models import ReportRow


class IExporter(ABC):
    """Interface for exporting report rows (new formats are new classes)."""

    @abstractmethod
    def export(self, rows: List[ReportRow], output_path: Path) -> None:
        """Export rows to the specified path."""
        pass
