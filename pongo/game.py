"""Game rules: input, paddle and ball updates, collisions, scoring and drawing."""

from __future__ import annotations

import os
import random
import subprocess
import sys
import time

import pygame

from pongo.ball import Ball
from pongo.paddle import Paddle
from pongo.renderable import identity, ortho
from pongo.settings import WORLD_HEIGHT, WORLD_WIDTH


def _clear_terminal():
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def ask_ai_opponent(input_fn, output):
    """Ask whether to play the computer; return True for the answer "y"."""
    print("Play against ai? y/n", file=output, flush=True)
    tokens = input_fn().split()
    ai_active = bool(tokens) and tokens[0] == "y"
    print(file=output)
    print("P1 Controls w/ arrow keys", file=output)
    if not ai_active:
        print("P2 Controls w/ arrow keys", file=output, flush=True)
    return ai_active


class Game:
    """Two paddles and a ball, updated once per frame and drawn through a renderer."""

    def __init__(
        self,
        renderer,
        shader,
        window,
        ai_active=None,
        *,
        clock=None,
        rng=None,
        input_fn=None,
        output=None,
        clear_screen=None,
    ):
        self.renderer = renderer
        self.shader = shader
        self.window = window
        self.output = sys.stdout if output is None else output
        self._clock = time.perf_counter if clock is None else clock
        self._rng = random.Random() if rng is None else rng
        self._clear_screen = _clear_terminal if clear_screen is None else clear_screen

        self.player_paddle = Paddle(10.0, 50.0, 1.5, 15.0, 40.0)
        self.enemy_paddle = Paddle(90.0, 50.0, 1.5, 15.0, 35.0, (1.0, 0.1, 1.0, 1.0))
        self.ball = Ball(50.0, 50.0, 40.0, 30.0, 2.0, (0.1, 1.0, 0.1, 1.0))

        self.player_score = 0
        self.enemy_score = 0
        self.ball_active = True
        self._last_frame_time = self._clock()

        if ai_active is None:
            ai_active = ask_ai_opponent(input if input_fn is None else input_fn, self.output)
        self.ai_active = bool(ai_active)

    def update_model(self):
        """Advance one frame: read keys, move everything and resolve collisions."""
        now = self._clock()
        delta_time = now - self._last_frame_time
        self._last_frame_time = now

        pressed = self.window.is_key_pressed
        if pressed(pygame.K_ESCAPE):
            self.window.set_should_close(True)

        if pressed(pygame.K_w):
            self.player_paddle.move_up(delta_time)
        if pressed(pygame.K_s):
            self.player_paddle.move_down(delta_time)

        if self.ai_active:
            self.update_enemy_ai(delta_time)
        elif pressed(pygame.K_UP):
            self.enemy_paddle.move_up(delta_time)
        elif pressed(pygame.K_DOWN):
            self.enemy_paddle.move_down(delta_time)

        if self.ball_active:
            self.ball.move(delta_time)

        self.handle_collisions()

    def draw_frame(self):
        """Clear the screen and draw the paddles and ball."""
        self.renderer.clear()
        projection = ortho(0.0, WORLD_WIDTH, 0.0, WORLD_HEIGHT, -1.0, 1.0)
        view = identity()

        self.renderer.begin_scene()
        self.renderer.submit(self.player_paddle.renderable)
        self.renderer.submit(self.enemy_paddle.renderable)
        self.renderer.submit(self.ball.renderable)

        self.shader.use()
        self.shader.set_mat("u_Projection", projection)
        self.shader.set_mat("u_View", view)

        self.renderer.end_scene(self.shader)

    def handle_collisions(self):
        """Bounce off paddles and the top and bottom walls; score at the side walls."""
        if self.ball.collides_with_paddle(self.player_paddle):
            self.ball.handle_paddle_collision(self.player_paddle)
        elif self.ball.collides_with_paddle(self.enemy_paddle):
            self.ball.handle_paddle_collision(self.enemy_paddle)

        if self.ball.is_out_of_bounds_y(0.0, WORLD_HEIGHT):
            self.ball.bounce_y()

        if self.ball.x - self.ball.radius < 0.0:
            self.enemy_score += 1
            self.reset_ball()
        elif self.ball.x + self.ball.radius > WORLD_WIDTH:
            self.player_score += 1
            self.reset_ball()

    def reset_ball(self):
        """Show the score and serve the ball from the centre in a random direction."""
        self.ball_active = False
        self._clear_screen()
        print(f"P1 Score: {self.player_score}", file=self.output)
        print(f"P2 Score: {self.enemy_score}", file=self.output, flush=True)

        random_vy = 20.0 + self._rng.randrange(40) - 20.0
        vx = 40.0 if self._rng.randrange(2) == 0 else -40.0
        self.ball.reset(WORLD_WIDTH / 2, WORLD_HEIGHT / 2, vx, random_vy)
        self.ball_active = True

    def update_enemy_ai(self, delta_time):
        """Follow the ball once it is moving towards the enemy's half."""
        target_y = self.ball.y
        current_y = self.enemy_paddle.y
        if self.ball.vx > 0 and self.ball.x > WORLD_WIDTH / 2:
            margin = self.enemy_paddle.height * 0.2
            if target_y > current_y + margin:
                self.enemy_paddle.move_up(delta_time)
            elif target_y < current_y - margin:
                self.enemy_paddle.move_down(delta_time)