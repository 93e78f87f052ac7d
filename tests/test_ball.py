import math

import pytest

from pongo.ball import Ball, circle_vertices
from pongo.mesh import Primitive
from pongo.paddle import Paddle


def test_circle_vertices_layout():
    vertices = circle_vertices(18)
    assert len(vertices) == 5 * (18 + 2)
    assert vertices[:5] == [0.0, 0.0, 0.0, 0.5, 0.5]
    for start in range(5, len(vertices), 5):
        x, y, z, u, v = vertices[start:start + 5]
        assert math.hypot(x, y) == pytest.approx(1.0)
        assert z == 0.0
        assert u == pytest.approx(x * 0.5 + 0.5)
        assert v == pytest.approx(y * 0.5 + 0.5)


def test_circle_closes_on_first_rim_point():
    vertices = circle_vertices(12)
    assert vertices[5:7] == pytest.approx(vertices[-5:-3])


def test_mesh_is_triangle_fan():
    ball = Ball(50.0, 50.0, 40.0, 30.0, 2.0)
    assert ball.renderable.mesh.primitive is Primitive.TRIANGLE_FAN
    assert len(ball.renderable.mesh.triangles()) == 18


def test_move():
    ball = Ball(50.0, 50.0, 40.0, 30.0, 2.0)
    ball.move(0.5)
    assert (ball.x, ball.y) == pytest.approx((50.0 + 40.0 * 0.5, 50.0 + 30.0 * 0.5))
    assert ball.renderable.transform[0, 3] == pytest.approx(ball.x)


def test_bounces_negate_velocity():
    ball = Ball(50.0, 50.0, 40.0, 30.0, 2.0)
    ball.bounce_x()
    ball.bounce_y()
    assert (ball.vx, ball.vy) == (-40.0, -30.0)


def test_reset_and_accelerate():
    ball = Ball(50.0, 50.0, 40.0, 30.0, 2.0)
    ball.reset(10.0, 20.0, -5.0, 6.0)
    ball.accelerate(2.0)
    assert (ball.x, ball.y, ball.vx, ball.vy) == (10.0, 20.0, -10.0, 12.0)


def test_transform_scales_by_radius():
    ball = Ball(30.0, 40.0, 0.0, 0.0, 2.0)
    transform = ball.renderable.transform
    assert transform[0, 0] == pytest.approx(2.0)
    assert transform[1, 1] == pytest.approx(2.0)
    assert (transform[0, 3], transform[1, 3]) == pytest.approx((30.0, 40.0))


def test_collision_detection():
    paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
    assert Ball(11.5, 50.0, -40.0, 0.0, 2.0).collides_with_paddle(paddle)
    assert not Ball(20.0, 50.0, -40.0, 0.0, 2.0).collides_with_paddle(paddle)


def test_no_collision_leaves_ball_alone():
    paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
    ball = Ball(20.0, 50.0, -40.0, 5.0, 2.0)
    ball.handle_paddle_collision(paddle)
    assert (ball.x, ball.y, ball.vx, ball.vy) == (20.0, 50.0, -40.0, 5.0)


def test_side_hit_reflects_and_speeds_up():
    paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
    ball = Ball(11.5, 50.0, -40.0, 0.0, 2.0)
    ball.handle_paddle_collision(paddle)
    assert ball.vx > 0
    assert ball.vy == pytest.approx(0.0)
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(40.0 * 1.02)
    assert not ball.collides_with_paddle(paddle)


def test_off_centre_hit_adds_vertical_spin():
    paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
    ball = Ball(11.5, 55.0, -40.0, 0.0, 2.0)
    ball.handle_paddle_collision(paddle)
    assert ball.vx > 0
    assert ball.vy > 0


def test_ball_inside_paddle_is_pushed_out():
    paddle = Paddle(10.0, 50.0, 4.0, 15.0, 40.0)
    ball = Ball(11.5, 50.0, -40.0, 0.0, 2.0)
    ball.handle_paddle_collision(paddle)
    assert ball.x > paddle.x + paddle.width / 2
    assert ball.vx > 0


def test_speed_is_capped():
    paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
    ball = Ball(11.5, 50.0, -400.0, 0.0, 2.0)
    ball.handle_paddle_collision(paddle)
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(150.0)


def test_out_of_bounds():
    ball = Ball(1.0, 74.0, 0.0, 0.0, 2.0)
    assert ball.is_out_of_bounds_x(0.0, 100.0)
    assert ball.is_out_of_bounds_y(0.0, 75.0)
    centred = Ball(50.0, 37.5, 0.0, 0.0, 2.0)
    assert not centred.is_out_of_bounds_x(0.0, 100.0)
    assert not centred.is_out_of_bounds_y(0.0, 75.0)