# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def grid_from(text):
    return [[int(ch) for ch in text[r * 9:(r + 1) * 9]] for r in range(9)]


# Solvable with naked singles alone
EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# Needs hidden singles along the way
HIDDEN = "200080300060070084030500209000105408000000000402706000301007040720040060004010003"
HIDDEN_SOLUTION = "245981376169273584837564219976125438513498627482736951391657842728349165654812793"

# Needs an X-Wing and a naked pair before singles can finish it
FISH = "100000569492056108056109240009640801064010000218035604040500016905061402621000005"
FISH_SOLUTION = "187423569492756138356189247539647821764218953218935674843592716975361482621874395"


@pytest.fixture
def easy_grid():
    return grid_from(EASY)


@pytest.fixture
def hidden_grid():
    return grid_from(HIDDEN)


@pytest.fixture
def solved_grid():
    return grid_from(EASY_SOLUTION)


@pytest.fixture
def rectangle_grid():
    # EASY_SOLUTION with r1c4, r1c5, r4c4, r4c5 blanked: 6 and 7 can be swapped
    # between them, so no amount of logic can finish it.
    g = grid_from(EASY_SOLUTION)
    for r, c in ((0, 3), (0, 4), (3, 3), (3, 4)):
        g[r][c] = 0
    return g


@pytest.fixture
def empty_grid():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def fish_grid():
    return grid_from(FISH)
