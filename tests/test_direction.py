import pytest

from mondrian.direction import ALL_DIRECTIONS, Direction


def test_default_is_right():
    assert Direction.default() is Direction.RIGHT


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.RIGHT, Direction.LEFT),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.UP, Direction.DOWN),
    ],
)
def test_opposite(direction, expected):
    assert direction.opposite() is expected


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_involution(direction):
    assert Direction.opposite(Direction.opposite(direction)) is direction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.RIGHT, Direction.DOWN),
        (Direction.DOWN, Direction.LEFT),
        (Direction.LEFT, Direction.UP),
        (Direction.UP, Direction.RIGHT),
    ],
)
def test_rotate_cw(direction, expected):
    assert direction.rotate_cw() is expected


@pytest.mark.parametrize("direction", list(Direction))
def test_four_rotations_return_home(direction):
    rotated = direction
    for _ in range(4):
        rotated = Direction.rotate_cw(rotated)
    assert rotated is direction
    assert Direction.rotate_cw(Direction.rotate_cw(direction)) is Direction.opposite(
        direction
    )


def test_horizontals_and_verticals():
    assert Direction.horizontals() == (Direction.LEFT, Direction.RIGHT)
    assert Direction.verticals() == (Direction.UP, Direction.DOWN)


@pytest.mark.parametrize("direction", list(Direction))
def test_orthogonal_excludes_axis(direction):
    ortho = Direction.orthogonal(direction)
    assert direction not in ortho
    assert Direction.opposite(direction) not in ortho
    assert Direction.rotate_cw(direction) in ortho


def test_all_directions_order():
    sequence = [Direction.default()]
    for _ in range(3):
        sequence.append(sequence[-1].rotate_cw())
    assert tuple(sequence) == ALL_DIRECTIONS
    assert ALL_DIRECTIONS == (
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
        Direction.UP,
    )


def test_values_are_variant_names():
    assert Direction("Left") is Direction.LEFT
    with pytest.raises(ValueError):
        Direction("Sideways")