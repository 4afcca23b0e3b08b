import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..config import settings
from ..exceptions import InvalidGradeOrStep, ScaleConfigurationError

logger = logging.getLogger(__name__)

GRADE_LEVELS = tuple(f"GL{n:02d}" for n in range(1, 18))
MIN_STEP = 1
MAX_STEP = 15

# CONJUSS monthly basic salary by grade level, steps 1-15 (Naira)
CONJUSS_BASE_SALARIES = {
    'GL01': [42000, 43470, 44940, 46410, 47880, 49350, 50820, 52290, 53760, 55230, 56700, 58170, 59640, 61110, 62580],
    'GL02': [48000, 49680, 51360, 53040, 54720, 56400, 58080, 59760, 61440, 63120, 64800, 66480, 68160, 69840, 71520],
    'GL03': [54000, 55890, 57780, 59670, 61560, 63450, 65340, 67230, 69120, 71010, 72900, 74790, 76680, 78570, 80460],
    'GL04': [62000, 64170, 66340, 68510, 70680, 72850, 75020, 77190, 79360, 81530, 83700, 85870, 88040, 90210, 92380],
    'GL05': [72000, 74520, 77040, 79560, 82080, 84600, 87120, 89640, 92160, 94680, 97200, 99720, 102240, 104760, 107280],
    'GL06': [84000, 86940, 89880, 92820, 95760, 98700, 101640, 104580, 107520, 110460, 113400, 116340, 119280, 122220, 125160],
    'GL07': [98000, 101430, 104860, 108290, 111720, 115150, 118580, 122010, 125440, 128870, 132300, 135730, 139160, 142590, 146020],
    'GL08': [115000, 119025, 123050, 127075, 131100, 135125, 139150, 143175, 147200, 151225, 155250, 159275, 163300, 167325, 171350],
    'GL09': [135000, 139725, 144450, 149175, 153900, 158625, 163350, 168075, 172800, 177525, 182250, 186975, 191700, 196425, 201150],
    'GL10': [160000, 165600, 171200, 176800, 182400, 188000, 193600, 199200, 204800, 210400, 216000, 221600, 227200, 232800, 238400],
    'GL11': [190000, 196700, 203400, 210100, 216800, 223500, 230200, 236900, 243600, 250300, 257000, 263700, 270400, 277100, 283800],
    'GL12': [225000, 232875, 240750, 248625, 256500, 264375, 272250, 280125, 288000, 295875, 303750, 311625, 319500, 327375, 335250],
    'GL13': [270000, 279450, 288900, 298350, 307800, 317250, 326700, 336150, 345600, 355050, 364500, 373950, 383400, 392850, 402300],
    'GL14': [320000, 331200, 342400, 353600, 364800, 376000, 387200, 398400, 409600, 420800, 432000, 443200, 454400, 465600, 476800],
    'GL15': [385000, 398425, 411850, 425275, 438700, 452125, 465550, 478975, 492400, 505825, 519250, 532675, 546100, 559525, 572950],
    'GL16': [465000, 481425, 497850, 514275, 530700, 547125, 563550, 579975, 596400, 612825, 629250, 645675, 662100, 678525, 694950],
    'GL17': [560000, 579800, 599600, 619400, 639200, 659000, 678800, 698600, 718400, 738200, 758000, 777800, 797600, 817400, 837200],
}


def _normalise_grade(grade_level) -> Optional[str]:
    if not isinstance(grade_level, str):
        return None
    return grade_level.strip().upper()


def _is_step(step) -> bool:
    return isinstance(step, int) and not isinstance(step, bool) and MIN_STEP <= step <= MAX_STEP


class CompensationScale:
    """Read-only grade/step salary table"""

    def __init__(self, rates: Mapping[str, Iterable[int]]):
        table: Dict[str, Tuple[int, ...]] = {}
        for grade, amounts in rates.items():
            code = _normalise_grade(grade)
            if not code:
                raise ScaleConfigurationError(f"Invalid grade code: {grade!r}")
            amounts = tuple(amounts)
            if len(amounts) != MAX_STEP:
                raise ScaleConfigurationError(
                    f"Grade {code} has {len(amounts)} steps, expected {MAX_STEP}"
                )
            for amount in amounts:
                if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                    raise ScaleConfigurationError(f"Invalid salary for grade {code}: {amount!r}")
            table[code] = amounts
        if not table:
            raise ScaleConfigurationError("Salary scale is empty")
        self._table = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, rates: Mapping[str, Iterable[int]]) -> "CompensationScale":
        return cls(rates)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "CompensationScale":
        """Load a scale stored as {"GL01": [step1, ..., step15], ...}"""
        path = Path(path)
        try:
            with open(path, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise ScaleConfigurationError(f"Cannot read salary scale {path}: {e}") from e

        if not isinstance(data, dict):
            raise ScaleConfigurationError(f"Salary scale {path} must be a JSON object")

        logger.info(f"Loaded salary scale with {len(data)} grades from {path}")
        return cls(data)

    @property
    def grades(self) -> Tuple[str, ...]:
        return tuple(self._table)

    def __contains__(self, grade_level) -> bool:
        return _normalise_grade(grade_level) in self._table

    def steps(self, grade_level: str) -> Tuple[int, ...]:
        """All step amounts for a grade"""
        code = _normalise_grade(grade_level)
        if code not in self._table:
            raise InvalidGradeOrStep(grade_level, None)
        return self._table[code]

    def is_valid(self, grade_level, step) -> bool:
        return _normalise_grade(grade_level) in self._table and _is_step(step)

    def base_salary(self, grade_level, step) -> int:
        """Monthly basic salary for a grade/step coordinate"""
        if not self.is_valid(grade_level, step):
            raise InvalidGradeOrStep(grade_level, step)
        return self._table[_normalise_grade(grade_level)][step - 1]


DEFAULT_SCALE = CompensationScale(CONJUSS_BASE_SALARIES)


def load_scale(path: Optional[Union[str, Path]] = None) -> CompensationScale:
    """Return the configured salary scale, falling back to CONJUSS"""
    path = path or settings.SALARY_SCALE_FILE
    if not path:
        return DEFAULT_SCALE
    return CompensationScale.from_json_file(path)


def get_basic_salary(grade_level: str, step: int) -> int:
    return DEFAULT_SCALE.base_salary(grade_level, step)


def is_valid_grade_step(grade_level: str, step: int) -> bool:
    return DEFAULT_SCALE.is_valid(grade_level, step)
