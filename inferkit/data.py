"""Course sample data.

Fixed nutrition-composition vectors used throughout the inference course: two
unpaired carbohydrate samples, two unpaired sugar-category samples, four
nutrient vectors and two precomputed sampling distributions (30 sample means of
magnesium and 30 sample proportions of sugar category ``"S1"``).
"""

from __future__ import annotations

import numpy as np


# Ordered (key, values) table; key order is the order of ``define_data()``.
_SAMPLE_TABLE: tuple[tuple[str, tuple], ...] = (
    (
        "Sample1_Data.Carbohydrate",
        (
            0, 0.5828941, 0.289542, 0.5439407, 0.6498322, 0.553541, 0.5905475,
            0.7167677, 0.5992276, 0.7148335, 0.5817453, 0.4649249, 0.6743769,
            0.6918767, 0.4309532, 0.6162988, 0.7012436, 0, 0.7230874, 0.6955362,
        ),
    ),
    (
        "Sample2_Data.Carbohydrate",
        (
            0, 0.6409975, 0, 0.7080199, 0.6485136, 0.7224053, 0, 0.5394527,
            0.5844252, 0.6068672, 0, 0.5305104, 0.4786956, 0.4987135, 0.7186016,
            0.5772132, 0, 0.4185277, 0.5630961, 0.6011605,
        ),
    ),
    (
        "Sample1_Data.Sugar.Total",
        (
            "S1", "S2", "S1", "S2", "S3", "S1", "S1", "S1", "S1", "S1",
            "S1", "S1", "S4", "S3", "S2", "S1", "S2", "S1", "S1", "S5",
        ),
    ),
    (
        "Sample2_Data.Sugar.Total",
        (
            "S1", "S1", "S1", "S1", "S4", "S3", "S1", "S2", "S1", "S1",
            "S1", "S1", "S2", "S1", "S1", "S2", "S1", "S2", "S1", "S1",
        ),
    ),
    (
        "Data.Protein",
        (
            0.6492829, 0.3668104, 0.6144942, 0.5358623, 0.424903, 0.6292939,
            0.5046221, 0.5447532, 0.3177311, 0.4338655, 0.4651436, 0.2180955,
            0.4273604, 0.5287393, 0.3821949, 0.3632984, 0.5250996, 0.6268681,
            0.5383786, 0.4114478,
        ),
    ),
    (
        "Data.Fat.Total.Lipid",
        (
            2.652537, 1.671473, 2.085672, 1.998774, 2.265921, 2.487404, 2.674149,
            2.823757, 2.585506, 3.301009, 1.82777, 0.5766134, 2.685123, 1.335001,
            1.495149, 1.302913, 1.558145, 2.095561, 2.453588, 3.13201,
        ),
    ),
    (
        "Data.Vitamins.Vitamin.B12",
        (
            1.238374, 0.1310283, 0.7839015, 0.1906204, 0.0861777, 0.9082586,
            0.4510756, 0, 0, 0, 0.2311117, 0.05826891, 0.3364722, 0.2623643,
            0.3074847, 0, 0.06765865, 0.3364722, 0, 0,
        ),
    ),
    (
        "Data.Major.Minerals.Magnesium",
        (
            3.178054, 2.833213, 2.772589, 2.833213, 2.833213, 2.944439, 2.772589,
            5.105945, 3.178054, 3.828641, 2.639057, 1.94591, 3.178054, 3.828641,
            1.791759, 3.526361, 3.091042, 3.178054, 3.178054, 3.610918,
        ),
    ),
    (
        "Medias_Muestrales_30",
        (
            2.161451, 1.929523, 2.212274, 2.160833, 1.966287, 2.183474, 1.696679,
            2.100056, 2.269257, 1.742109, 2.347255, 1.529998, 1.767131, 2.375847,
            2.283483, 1.979091, 1.957344, 2.099081, 2.087817, 1.945333, 2.049644,
            2.191166, 2.228053, 1.975063, 2.039961, 1.847781, 2.16524, 1.989566,
            1.858383, 1.815181,
        ),
    ),
    (
        "Proporciones_Muestrales_30",
        (
            0.6, 0.7, 0.75, 0.65, 0.7, 0.55, 0.65, 0.45, 0.65, 0.7, 0.65, 0.6,
            0.75, 0.5, 0.6, 0.55, 0.6, 0.45, 0.6, 0.6, 0.6, 0.8, 0.55, 0.4, 0.75,
            0.4, 0.9, 0.6, 0.5, 0.55,
        ),
    ),
)

DATA_KEYS: tuple[str, ...] = tuple(key for key, _ in _SAMPLE_TABLE)
CATEGORICAL_KEYS: tuple[str, ...] = ("Sample1_Data.Sugar.Total", "Sample2_Data.Sugar.Total")
NUMERIC_KEYS: tuple[str, ...] = tuple(k for k in DATA_KEYS if k not in CATEGORICAL_KEYS)
SUGAR_CATEGORIES: tuple[str, ...] = ("S1", "S2", "S3", "S4", "S5")


def _as_readonly(key: str, values: tuple) -> np.ndarray:
    dtype = str if key in CATEGORICAL_KEYS else np.float64
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr


def define_data() -> dict[str, np.ndarray]:
    """Return the course dataset as an ordered mapping of read-only arrays.

    Each call builds fresh arrays from the same literal table, so results are
    element-wise identical across calls.

    Returns
    -------
    dict
        ``Sample1_Data.Carbohydrate``, ``Sample2_Data.Carbohydrate``,
        ``Sample1_Data.Sugar.Total``, ``Sample2_Data.Sugar.Total``,
        ``Data.Protein``, ``Data.Fat.Total.Lipid``,
        ``Data.Vitamins.Vitamin.B12``, ``Data.Major.Minerals.Magnesium``
        (20 values each), ``Medias_Muestrales_30`` and
        ``Proporciones_Muestrales_30`` (30 values each).
    """

    return {key: _as_readonly(key, values) for key, values in _SAMPLE_TABLE}


def get_variable(name: str) -> np.ndarray:
    """Return a single vector of the course dataset or raise ``KeyError``."""

    for key, values in _SAMPLE_TABLE:
        if key == name:
            return _as_readonly(key, values)
    raise KeyError(f"Unknown variable: {name!r}. Available: {', '.join(DATA_KEYS)}")
