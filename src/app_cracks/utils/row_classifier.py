"""
Классификация строк листа обследования трещин.

Колонки фиксированы по позиции (заголовки по имени не сопоставляются):
блок, пикетаж от, пикетаж до, RL, тип дефекта, L, W, H, видео, начало, конец.

Состояние между строками: имя последнего блока (fill-down) и счётчик подряд
идущих пустых строк. Пять пустых или «декоративных» строк подряд считаются
концом данных.
"""

from dataclasses import asdict, dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Optional, Sequence

from .normalizers import cell_text, is_blank, parse_time, time_to_seconds, to_number

EMPTY_RUN_LIMIT = 5

BLOCK_MISSING = "Block missing"
INVALID_START = "Invalid startTime format"
INVALID_END = "Invalid endTime format"
TIMES_NOT_PAIRED = "Both startTime and endTime required together"
START_AFTER_END = "startTime > endTime"


class Column(IntEnum):
    BLOCK = 0
    CHAINAGE_FROM = 1
    CHAINAGE_TO = 2
    RL = 3
    DEFECT_TYPE = 4
    LENGTH = 5
    WIDTH = 6
    HEIGHT = 7
    VIDEO = 8
    START = 9
    END = 10


EXPECTED_COLUMNS = len(Column)


class RowKind(str, Enum):
    BLANK = "blank"
    FILLER = "filler"
    ERROR = "error"
    DATA = "data"
    STOP = "stop"


@dataclass
class CrackRowData:
    block_id: int
    chainage_from: Optional[str]
    chainage_to: Optional[str]
    rl: Optional[float]
    defect_type: Optional[str]
    length_mm: Optional[float]
    width_mm: Optional[float]
    height_mm: Optional[float]
    video_file_name: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]

    def has_content(self) -> bool:
        # Одной отметки RL или видео недостаточно
        return bool(
            self.defect_type
            or self.start_time
            or self.end_time
            or self.length_mm
            or self.width_mm
            or self.height_mm
            or self.chainage_from
            or self.chainage_to
        )

    def as_model_kwargs(self) -> dict:
        return asdict(self)


@dataclass
class RowDecision:
    kind: RowKind
    error: Optional[str] = None
    data: Optional[CrackRowData] = None


def _cell(row: Sequence[Any], column: Column) -> Any:
    return row[column] if column < len(row) else None


def validate_times(
    raw_start: Any, raw_end: Any, start_time: Optional[str], end_time: Optional[str]
) -> Optional[str]:
    """Текст ошибки для пары тайм-кодов или None, если пара корректна."""
    start_provided = not is_blank(raw_start)
    end_provided = not is_blank(raw_end)

    if start_provided and not start_time:
        return INVALID_START
    if end_provided and not end_time:
        return INVALID_END
    if start_provided != end_provided:
        return TIMES_NOT_PAIRED
    if start_time and end_time and time_to_seconds(start_time) > time_to_seconds(end_time):
        return START_AFTER_END
    return None


class RowClassifier:
    """
    Решает судьбу каждой строки после заголовка.

    ``resolve_block`` вызывается, как только для строки известно имя блока,
    и возвращает ID блока.
    """

    def __init__(self, resolve_block: Callable[[str], int]):
        self.resolve_block = resolve_block
        self.last_block_name = ""
        self.consecutive_empty = 0

    def classify(self, row: Sequence[Any]) -> RowDecision:
        if all(is_blank(value) for value in row):
            return self._count_empty(RowKind.BLANK)

        block_name = cell_text(_cell(row, Column.BLOCK)) or self.last_block_name
        if not block_name:
            return RowDecision(RowKind.ERROR, error=BLOCK_MISSING)
        self.last_block_name = block_name
        block_id = self.resolve_block(block_name)

        raw_start = _cell(row, Column.START)
        raw_end = _cell(row, Column.END)
        start_time = parse_time(raw_start)
        end_time = parse_time(raw_end)

        error = validate_times(raw_start, raw_end, start_time, end_time)
        if error:
            return RowDecision(RowKind.ERROR, error=error)

        data = CrackRowData(
            block_id=block_id,
            chainage_from=cell_text(_cell(row, Column.CHAINAGE_FROM)),
            chainage_to=cell_text(_cell(row, Column.CHAINAGE_TO)),
            rl=to_number(_cell(row, Column.RL)),
            defect_type=cell_text(_cell(row, Column.DEFECT_TYPE)),
            length_mm=to_number(_cell(row, Column.LENGTH)),
            width_mm=to_number(_cell(row, Column.WIDTH)),
            height_mm=to_number(_cell(row, Column.HEIGHT)),
            video_file_name=cell_text(_cell(row, Column.VIDEO)),
            start_time=start_time,
            end_time=end_time,
        )

        if not data.has_content():
            return self._count_empty(RowKind.FILLER)

        self.consecutive_empty = 0
        return RowDecision(RowKind.DATA, data=data)

    def _count_empty(self, kind: RowKind) -> RowDecision:
        self.consecutive_empty += 1
        if self.consecutive_empty >= EMPTY_RUN_LIMIT:
            return RowDecision(RowKind.STOP)
        return RowDecision(kind)
