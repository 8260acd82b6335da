# tests/test_obstacles.py
from bird_jump.bird import Bird
from bird_jump.obstacles import Obstacle, ObstacleField
from bird_jump.physics import DESKTOP_PHYSICS, MOBILE_PHYSICS, PhysicsProfile
from bird_jump.viewport import Viewport


def _bird(x=50, y=90, radius=15):
    return Bird(x=x, y=y, radius=radius)


def test_bird_above_the_gap_collides():
    obstacle = Obstacle(40, 100)
    bird = _bird()
    assert obstacle.overlaps(bird, 60)
    assert obstacle.collides_with(bird, 60, 180)


def test_bird_below_the_gap_collides():
    assert Obstacle(40, 100).collides_with(_bird(y=270), 60, 180)


def test_bird_inside_the_gap_is_safe():
    assert not Obstacle(40, 100).collides_with(_bird(y=115), 60, 180)
    assert not Obstacle(40, 100).collides_with(_bird(y=265), 60, 180)


def test_no_collision_without_horizontal_overlap():
    # bird spans 35..65
    assert not Obstacle(65, 100).collides_with(_bird(), 60, 180)
    assert not Obstacle(-25, 100).collides_with(_bird(), 60, 180)


def test_advance_reports_crash(profile):
    field = ObstacleField(profile=profile)
    field.obstacles.append(Obstacle(42.5, 100))
    result = field.advance(_bird(), Viewport(300, 600))
    assert field.obstacles[0].x == 40
    assert result.crashed
    assert result.points == 0


def test_first_advance_spawns_one_obstacle_at_the_right_edge(fixed_rng):
    still = PhysicsProfile(name="still", gravity=0.0, jump_impulse=-1.0, scroll_speed=0.0, gap_size=180)
    field = ObstacleField(profile=still, rng=fixed_rng(0.5))
    field.advance(_bird(y=300), Viewport(1024, 720))
    assert len(field) == 1
    assert field.obstacles[0].x == 1024


def test_spawned_obstacle_moves_in_the_same_frame(profile, fixed_rng):
    field = ObstacleField(profile=profile, rng=fixed_rng(0.5))
    field.advance(_bird(y=300), Viewport(1024, 720))
    assert [o.x for o in field] == [1024 - 2.5]


def test_gap_top_range_is_inclusive_and_floored(fixed_rng):
    viewport = Viewport(1024, 720)
    assert ObstacleField(rng=fixed_rng(0.0)).random_gap_top(viewport.height) == 72
    assert ObstacleField(rng=fixed_rng(0.999999)).random_gap_top(viewport.height) == 432
    assert ObstacleField(rng=fixed_rng(0.5)).random_gap_top(viewport.height) == 252


def test_spawn_spacing_matches_spawn_distance(profile, fixed_rng):
    field = ObstacleField(profile=profile, rng=fixed_rng(0.5))
    bird = _bird(x=-500)
    viewport = Viewport(1000, 600)
    for _ in range(1000):
        field.advance(bird, viewport)

    xs = [o.x for o in field]
    assert len(xs) >= 3
    assert all(b - a == 300 for a, b in zip(xs, xs[1:]))


def test_passing_an_obstacle_scores_exactly_once(profile):
    field = ObstacleField(profile=profile, spawn_distance=10000)
    field.obstacles.append(Obstacle(10, 100))
    bird = _bird(y=190)
    viewport = Viewport(400, 400)

    points = []
    for _ in range(60):
        result = field.advance(bird, viewport)
        assert not result.crashed
        points.append(result.points)

    assert sum(points) == 1
    # trailing edge 10 + 60 - 2.5 * 15 = 32.5 is the first position left of 35
    assert points.index(1) == 14


def test_passed_flag_set_when_scored(profile):
    field = ObstacleField(profile=profile, spawn_distance=10000)
    obstacle = Obstacle(-30, 100)
    field.obstacles.append(obstacle)
    bird = _bird(y=190)

    assert field.advance(bird, Viewport(400, 400)).points == 1
    assert obstacle.passed
    assert field.advance(bird, Viewport(400, 400)).points == 0


def test_prune_keeps_order_and_edge_obstacles():
    field = ObstacleField()
    for x in (-70, -61, -60, 100):
        field.obstacles.append(Obstacle(x, 100))

    assert field.prune() == 2
    # trailing edge exactly 0 is still on screen
    assert [o.x for o in field] == [-60, 100]


def test_advance_prunes_from_the_front(profile):
    field = ObstacleField(profile=profile, spawn_distance=10000)
    field.obstacles.extend([Obstacle(-58, 100), Obstacle(200, 100)])
    field.advance(_bird(x=-500), Viewport(400, 400))
    assert [o.x for o in field] == [197.5]


def test_reset_clears_and_refreshes_profile():
    field = ObstacleField(profile=DESKTOP_PHYSICS)
    field.obstacles.append(Obstacle(100, 100))
    field.reset(MOBILE_PHYSICS)
    assert len(field) == 0
    assert field.scroll_speed == MOBILE_PHYSICS.scroll_speed
    assert field.gap_size == MOBILE_PHYSICS.gap_size


def test_apply_profile_leaves_obstacles_alone():
    field = ObstacleField(profile=DESKTOP_PHYSICS)
    field.obstacles.append(Obstacle(100, 100))
    field.apply_profile(MOBILE_PHYSICS)
    assert [o.x for o in field] == [100]
    assert field.gap_size == 200
