# demonophobia

A small side-scrolling game built on pygame. The hero stands in a room
with a wall on each side. He can walk, crouch, sit and crawl, and the
walls stop him when he reaches them.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
demonophobia
```

This opens an 800×600 window titled "Demonophobia" that runs at 60
frames per second. The game loads its images from paths relative to the
working directory:

- `assets/sprite/hero/hero.png`: the hero's sprite sheet, a grid of
  6 columns by 5 rows of frames
- `assets/sprite/rooms/room1a.png`: the room's background

| Key | Action |
|-----|--------|
| `A` / `D` | walk left / right |
| `S` (hold) | crouch; after 0.2 s the hero sits. Releasing `S` while crouching returns him to standing |
| `A` / `D` while sitting | crawl at half walking speed |
| `F1` | toggle debug mode, which draws the body, hitbox and walls as translucent rectangles |
| `Esc` or closing the window | quit |

## How it fits together

- `demonophobia.geometry`: `Vector2`, `Rectangle` and `check_collision_recs`,
  which treats touching edges as no overlap.
- `demonophobia.controls`: the `Key` enum, the per-frame `InputState`
  (`is_down`, `is_pressed`, `is_released`) and `Debug`, which flips
  `debug_mode` when `F1` is pressed.
- `demonophobia.sprite_sheet.SpriteSheet`: cuts a texture into a grid of
  frames. `change_frame` selects a frame row by row and wraps past the
  last one. `set_flip` mirrors frames by negating the source rectangle's size.
- `demonophobia.animation.Animation`: steps a sprite sheet through a
  range of frames at a given number of frames per second. At the end it
  either wraps around or plays back the other way.
- `demonophobia.states`: the hero's state machine, `IdleState`,
  `MoveState`, `HalfSitState`, `SitState` and `CrawlState`.
- `demonophobia.hero.Hero`: position, body and hitbox, wall collision,
  facing direction and the five animations, indexed by `AnimationSlot`.
- `demonophobia.wall`: the `GameObject` interface and `Wall`, which is
  only drawn in debug mode.
- `demonophobia.room`: the `Scene` interface, `Room` with its left and
  right walls, and `Room1`, which loads its background from the assets
  when none is passed in.
- `demonophobia.window`: `Window` sets up pygame and runs the main
  loop. `main` is the entry point of the `demonophobia` command.

Game logic takes input as an `InputState` and the frame length as a
number in seconds (`Hero.frame_time`, `Animation.update(frame_time)`).
The hero, states and animations therefore run without a display. A
`Hero` can be built from a texture size alone, with no image.

## What it does not do

There is one room and nothing beyond it: no other rooms or level
changes, no enemies, no sound, no menus and no saving. A background
path for a second room image (`ROOM_1B_BG`) is defined but not used.