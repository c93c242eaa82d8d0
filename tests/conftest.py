import random

import pytest

from tsp_search.geometry import City

SQUARE_TSP = """NAME: square4
TYPE: TSP
COMMENT: four corners
DIMENSION: 4
EDGE_WEIGHT_TYPE: EUC_2D
NODE_COORD_SECTION
1 0 0
2 0 10
3 10 10
4 10 0
EOF
"""

SQUARE_TOUR = """NAME: square4.opt.tour
TYPE: TOUR
DIMENSION: 4
TOUR_SECTION
1
2
3
4
-1
EOF
"""


@pytest.fixture
def square():
    return [City(0, 0), City(0, 10), City(10, 10), City(10, 0)]


@pytest.fixture
def scattered():
    rng = random.Random(2024)
    return [City(rng.randrange(200), rng.randrange(200)) for _ in range(25)]


@pytest.fixture
def square_tsp(tmp_path):
    path = tmp_path / "square4.tsp"
    path.write_text(SQUARE_TSP)
    return path


@pytest.fixture
def square_opt_tour(square_tsp):
    path = square_tsp.with_suffix(".opt.tour")
    path.write_text(SQUARE_TOUR)
    return path
