from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import gspread
from google.oauth2.service_account import Credentials
from gspread.utils import ValueInputOption, ValueRenderOption, rowcol_to_a1

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]


@dataclass
class GSheetConfig:
    spreadsheet_id: str
    worksheet: str
    credentials_file: str


class GSheetTable:
    """Google Sheets worksheet behind the tabular store contract.

    Values are written RAW so the display text of a cell is exactly what
    the ledger wrote.
    """

    def __init__(self, worksheet: gspread.Worksheet):
        self._ws = worksheet

    @classmethod
    def open(cls, config: GSheetConfig) -> "GSheetTable":
        creds = Credentials.from_service_account_file(config.credentials_file, scopes=SCOPES)
        client = gspread.authorize(creds)
        spreadsheet = client.open_by_key(config.spreadsheet_id)
        return cls(spreadsheet.worksheet(config.worksheet))

    def get_value(self, row: int, col: int) -> Any:
        return self._ws.cell(row, col, value_render_option=ValueRenderOption.unformatted).value

    def get_display(self, row: int, col: int) -> str:
        value = self._ws.cell(row, col, value_render_option=ValueRenderOption.formatted).value
        return "" if value is None else str(value)

    def set_value(self, row: int, col: int, value: Any) -> None:
        self._ws.update(
            [["" if value is None else value]],
            rowcol_to_a1(row, col),
            value_input_option=ValueInputOption.raw,
        )

    def get_note(self, row: int, col: int) -> str:
        return self._ws.get_note(rowcol_to_a1(row, col)) or ""

    def set_note(self, row: int, col: int, note: str) -> None:
        self._ws.update_note(rowcol_to_a1(row, col), note)

    def insert_row_before(self, row: int) -> None:
        self._ws.insert_row([""], index=row, inherit_from_before=False)

    def insert_column_before(self, col: int) -> None:
        self._ws.insert_cols([[""]], col=col, inherit_from_before=False)

    def _values(self) -> List[List[str]]:
        return self._ws.get_all_values()

    def last_row(self) -> int:
        return len(self._values())

    def last_column(self) -> int:
        return max((len(r) for r in self._values()), default=0)

    def sort_rows(
        self,
        *,
        col: int,
        first_row: int,
        descending: bool = False,
        key: Optional[Callable[[str], Any]] = None,
    ) -> None:
        # Sheet-native sort keeps notes attached to their cells. With a key,
        # rows are ranked client-side into a scratch column which is sorted on
        # and then cleared, so "100:00:00" orders above "99:00:00".
        last_row = self.last_row()
        last_col = self.last_column()
        if last_row <= first_row:
            return
        if key is None:
            cell_range = f"{rowcol_to_a1(first_row, 1)}:{rowcol_to_a1(last_row, last_col)}"
            self._ws.sort((col, "des" if descending else "asc"), range=cell_range)
            return

        texts = self.get_column(col, first_row)[: last_row - first_row + 1]
        order = sorted(range(len(texts)), key=lambda i: key(texts[i]), reverse=descending)
        ranks = [0] * len(texts)
        for position, index in enumerate(order):
            ranks[index] = position

        rank_col = last_col + 1
        if rank_col > self._ws.col_count:
            self._ws.add_cols(rank_col - self._ws.col_count)
        rank_range = f"{rowcol_to_a1(first_row, rank_col)}:{rowcol_to_a1(last_row, rank_col)}"
        self._ws.update([[r] for r in ranks], rank_range, value_input_option=ValueInputOption.raw)
        self._ws.sort((rank_col, "asc"), range=f"{rowcol_to_a1(first_row, 1)}:{rowcol_to_a1(last_row, rank_col)}")
        self._ws.batch_clear([rank_range])

    def get_column(self, col: int, first_row: int) -> List[str]:
        values = self._values()
        return [(r[col - 1] if col <= len(r) else "") for r in values[first_row - 1:]]

    def get_row(self, row: int, first_col: int) -> List[str]:
        values = self._values()
        width = max((len(r) for r in values), default=0)
        cells = values[row - 1] if row <= len(values) else []
        return [(cells[c - 1] if c <= len(cells) else "") for c in range(first_col, width + 1)]
