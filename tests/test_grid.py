import pytest

from lobiu_sala.entities import DEFAULT_ENEMY_DAMAGE, DEFAULT_ENEMY_NAME
from lobiu_sala.errors import GridConfigError
from lobiu_sala.grid import WALL_GLYPH, CellType, Grid
from lobiu_sala.items import SHIELD_NAME, TREASURE_NAME, WATER_NAME, BREAD_NAME


def layout(grid: Grid):
    return [[cell.type for cell in row] for row in grid.cells]


def test_default_placement_counts_with_seed():
    grid = Grid(10, 10, start=(0, 0), seed=42)

    assert len(grid.cells_of(CellType.TREASURE)) == 1
    assert len(grid.cells_of(CellType.ITEM)) == 5
    assert len(grid.cells_of(CellType.ENEMY)) == 8
    assert grid.cell(0, 0).type is CellType.EMPTY


def test_same_seed_gives_identical_layout():
    a = Grid(10, 10, start=(0, 0), seed=7)
    b = Grid(10, 10, start=(0, 0), seed=7)

    assert layout(a) == layout(b)
    assert [c.item.name for _, _, c in a.iter_cells() if c.item] == [
        c.item.name for _, _, c in b.iter_cells() if c.item
    ]


def test_start_cell_never_used():
    for seed in range(25):
        grid = Grid(4, 4, start=(2, 1), seed=seed, item_count=5, enemy_count=8)
        assert grid.cell(2, 1).type is CellType.EMPTY
        assert len(grid.cells_of(CellType.EMPTY)) == 1


def test_payloads_match_cell_types():
    grid = Grid(10, 10, seed=3)
    for x, y, cell in grid.iter_cells():
        assert cell.consumed is False
        assert cell.glyph == WALL_GLYPH
        if cell.type is CellType.TREASURE:
            assert cell.item.name == TREASURE_NAME
        elif cell.type is CellType.ITEM:
            assert cell.item.name in {WATER_NAME, SHIELD_NAME, BREAD_NAME}
        elif cell.type is CellType.ENEMY:
            assert cell.enemy.name == DEFAULT_ENEMY_NAME
            assert cell.enemy.damage == DEFAULT_ENEMY_DAMAGE
            assert cell.enemy.pos == (x, y)
        else:
            assert cell.item is None and cell.enemy is None


def test_custom_counts():
    grid = Grid(6, 5, start=(4, 5), seed=1, item_count=2, enemy_count=0)
    assert len(grid.cells_of(CellType.ITEM)) == 2
    assert grid.enemies() == []


def test_too_many_placements_rejected():
    with pytest.raises(GridConfigError):
        Grid(3, 3, item_count=5, enemy_count=8)


@pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)


def test_start_outside_grid_rejected():
    with pytest.raises(ValueError):
        Grid(5, 5, start=(5, 0))


def test_cell_access_is_bounds_checked():
    grid = Grid(10, 10, seed=1)
    with pytest.raises(IndexError):
        grid.cell(10, 0)
    with pytest.raises(IndexError):
        grid.cell(0, -1)


def test_glyph_rows_are_walls():
    grid = Grid(3, 4, seed=0, item_count=1, enemy_count=1)
    assert grid.glyph_rows() == ["####"] * 3
