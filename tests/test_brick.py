import pytest

from arkanoid import config
from arkanoid.brick import Brick, BrickColor, points_for_color, rgb_for_color
from arkanoid.powerups import PowerType, PowerUp


@pytest.mark.parametrize(
    "color, points",
    [
        (BrickColor.WHITE, config.WHITE_POINTS),
        (BrickColor.YELLOW, config.YELLOW_POINTS),
        (BrickColor.SILVER_MODIFIED, config.SILVER_POINTS),
        (BrickColor.SILVER, 0),
        (BrickColor.GOLD, 0),
        (BrickColor.NONE, 0),
    ],
)
def test_points_for_color(color, points):
    assert points_for_color(color) == points


def test_rgb_for_color():
    assert rgb_for_color(BrickColor.GOLD) == config.GOLD_RGB
    assert rgb_for_color(BrickColor.NONE) == config.BACKGROUND_RGB


def test_new_brick_takes_color_values():
    brick = Brick(BrickColor.RED)
    assert not brick.destroyed
    assert brick.points == config.RED_POINTS
    assert brick.rgb == config.RED_RGB
    assert brick.width == config.BRICK_DEFAULT_WIDTH
    assert brick.power_up.type is PowerType.NONE


def test_empty_cell_is_destroyed_from_the_start():
    brick = Brick(11)
    assert brick.color is BrickColor.NONE
    assert brick.destroyed


def test_unknown_color_is_rejected():
    with pytest.raises(ValueError):
        Brick(42)


def test_hit_destroys_plain_brick():
    brick = Brick(BrickColor.WHITE)
    brick.hit(40.0, 75.0)
    assert brick.destroyed
    assert brick.color is BrickColor.NONE
    assert brick.points == 0


def test_hit_releases_power_up_at_middle():
    brick = Brick(BrickColor.BLUE, PowerUp(PowerType.LASER))
    brick.hit(40.0, 75.0)
    assert (brick.power_up.x, brick.power_up.y) == (40.0, 75.0)


def test_hit_during_interruption_keeps_power_up_in_place():
    brick = Brick(BrickColor.BLUE, PowerUp(PowerType.LASER))
    start = (brick.power_up.x, brick.power_up.y)
    brick.hit(40.0, 75.0, interruption=True)
    assert brick.destroyed
    assert (brick.power_up.x, brick.power_up.y) == start


def test_silver_needs_two_hits():
    brick = Brick(BrickColor.SILVER)
    brick.hit(40.0, 75.0)
    assert not brick.destroyed
    assert brick.color is BrickColor.SILVER_MODIFIED
    assert brick.points == config.SILVER_POINTS
    assert brick.rgb == config.SILVER_MODIFIED_RGB
    brick.hit(40.0, 75.0)
    assert brick.destroyed


def test_gold_is_unbreakable():
    brick = Brick(BrickColor.GOLD)
    for _ in range(3):
        brick.hit(40.0, 75.0)
    assert not brick.destroyed
    assert brick.color is BrickColor.GOLD