# pongo

A small Pong game. Two paddles, one ball, a 100 × 75 world drawn into an
800 × 600 pygame window.

## Installing

```
pip install .
```

This pulls in `pygame` and `numpy`.

## Playing

```
pongo
```

The command takes no options. When it starts, the game asks in the terminal
whether you want to play against the computer:

```
Play against ai? y/n
```

Type `y` to have the right paddle follow the ball by itself once the ball is
moving towards it in the right half of the field. Type anything else to play
with two people.

Controls:

- Left paddle: `W` moves up, `S` moves down.
- Right paddle (two-player mode): `Up` and `Down` arrow keys.
- `Escape`, or closing the window, ends the game.

The ball bounces off the top and bottom of the field. When it touches the left
wall the right player scores; when it touches the right wall the left player
scores. The terminal is then cleared, both scores are printed, and the ball is
served again from the centre, left or right at random, with a random upward
speed between 0 and 39 world units per second.

Each time the ball hits a paddle it is reflected off the surface it struck and
gets 2 % faster, up to a top speed of 150 world units per second. Where it
strikes the paddle changes its angle: a hit near a paddle's end sends it off
more steeply.

## Using it as a library

The game parts can be used without opening a window:

- `pongo.ball.Ball` and `pongo.paddle.Paddle` hold the movement and collision
  rules (`move`, `handle_paddle_collision`, `move_up`, `move_down`, ...).
- `pongo.game.Game(renderer, shader, window, ai_active=...)` runs one step of
  the game with `update_model()` and draws it with `draw_frame()`. Passing
  `ai_active` skips the terminal question; `clock`, `rng`, `input_fn`,
  `output` and `clear_screen` can be given to control time, randomness and
  terminal I/O. The `window` only needs `is_key_pressed(key)` and
  `set_should_close(flag)`.
- `pongo.renderer.Renderer(surface)` draws into any pygame `Surface`;
  `pongo.shader.Shader` holds the uniforms (`u_Projection`, `u_View`,
  `u_Model`, `u_Color`) and projects points to device coordinates.
- `pongo.settings.world_to_ndc(wx, wy)` maps world coordinates to normalised
  device coordinates.

## What it does not do

Drawing is done in software with pygame's polygon filling; there is no GPU
shader pipeline. There is no pause after a point, no winning score and no
on-screen score display: scores appear only in the terminal.

## Running the tests

```
pip install ".[test]"
pytest
```