# keepwarden

The game-logic core of a real-time castle-defence strategy game. It covers scheduling, tweening, animation and state handling, unit behaviour and territory. None of it needs a window or a GPU. Drawing requests become `DrawCommand` values. A `SpriteHolder` passes them to a renderer you supply, or collects them in its `commands` list.

## Modules

- `keepwarden.timer`: `Timer` runs tasks keyed by tag as you feed time into `update(dt)`.
  - `after` calls a function once after a delay.
  - `every` repeats a call. A `count` of 0 repeats forever; otherwise the task runs `count` times and then calls `after_action`.
  - `during` calls a function on every update for a span of time.
  - `tween` moves the numbers in a dictionary towards target values.
  - `cancel(tag)` drops a task. A task scheduled under a tag that is already in use replaces the old task.
  - `generate_uuid()` makes the random tags used when you give none. `collect_payload` computes tween deltas.
  - `TimerTaskType` lists the kinds of task.
- `keepwarden.tweening`: the easing curves `linear`, `quad`, `cubic`, `quart`, `quint`, `sine`, `expo`, `circ`, `back`, `bounce` and `elastic`, and the combinators `chain` and `out`.
  - `tween_value(method, s, args)` evaluates names such as `"linear"`, `"in-quad"`, `"out-bounce"`, `"in-out-cubic"` and `"out-in-sine"`.
  - An unknown curve name after a known prefix raises `ValueError`. An unrecognised prefix gives `0.0`.
  - `back` reads `args["bounciness"]`. `elastic` reads `args["amp"]` and `args["period"]`.
- `keepwarden.shake`: `Shake(amplitude, duration, frequency, rng=None)` is a decaying noise source for screen shake.
  - `get_amplitude(t)` gives the displacement at time `t`.
  - `update(dt)` clears `shaking` once the duration has passed.
- `keepwarden.state_machine`: `State`, with the hooks `enter`, `exit`, `update` and `draw`, and `StateMachine`.
  - `change_state(name, params)` leaves the current state and enters the named one.
  - An unknown name raises `KeyError`.
- `keepwarden.animation`: `Animation(frames, loop, spf=0.42)` steps through frame numbers over time.
  - `current_frame()` gives the frame shown now. `is_finished()` is true once a non-looping animation has played through.
- `keepwarden.directions`: `Direction` holds the eight compass directions in screen space.
  - `get_direction(dx, dy)` snaps a vector to the nearest one.
  - `direction_rows()` and `direction_row(direction)` give the sprite-sheet row of each direction.
- `keepwarden.rules`: the random helpers `random_choice`, `random_int_in_range` and `random_float_in_range`, which take an optional `random.Random`. It also holds the castle rules `max_castle_health(level)` and `castle_attack_interval(level)`.
- `keepwarden.warrior_types`: `WarriorType`, `warrior_size(warrior_type)` and `warrior_sprite_ids(warrior_type)`.
  - `warrior_sprite_ids` returns the sheets in the order idle, attacks, dead, run.
  - Only swordsmen, spearmen and shield bearers have sheets. Other kinds get an empty list.
- `keepwarden.sprites`: `Rect`, `SpriteSheet`, `DrawCommand` and `SpriteHolder`.
  - `SpriteSheet` does the frame maths: `frame_count()` and `source_rect(sprite_no, flipped)`.
  - `SpriteHolder` registers sheets with `add`. It has the draw calls `draw_sprite`, `draw_sprite_with_color` and `draw_whole`, and `sprite_size` for a sheet's texture size. Frames that do not exist draw nothing.
- `keepwarden.transform`: `Camera2D` and the conversions `to_world_coords(camera, x, y)` and `to_camera_coords(camera, x, y)`.
  - `TransformationStack` holds nested cameras and converts coordinates through the bottom one.
  - `pop` on an empty stack raises `IndexError`, and so does converting through one.
- `keepwarden.property`: `PropertyType`, `RingLayout`, `ChanceList`, `Property`, `PropertyRing` and `properties_for_ring`.
  - Plots are laid out in square rings around a centre, with types drawn from a weighted bag.
  - Productive plots add gold, wood, stone or food to their ring's region on a timer.
- `keepwarden.region`: `Region` holds a resource stock and rings of property (two by default).
  - `add_gold`, `add_wood`, `add_stone` and `add_food` add to the stock.
  - `set_health_fraction` shrinks the visible extent of the region.
- `keepwarden.tower_spawn`: `TowerSpawn`, `TowerSpawnRing` and `TowerSpawnLocation`.
  - There are two rings of build sites.
  - A timer offers a new tower every 4–6 seconds, in the innermost ring that has a free site. The offer is made through a factory you pass in.
- `keepwarden.warrior_states`: `WarriorStateParams`, `IdleWarrior`, `RunningWarrior` and `AttackingWarrior`, the animation states of a warrior.
- `keepwarden.warrior`: `Warrior` and its kinds `ShieldBearer`, `Spearman` and `Swordsman`.
  - Warriors have health, attacks with a delay and a cooldown, and switch between idle, running and attacking.
  - `create_warrior(warrior_type, rel_x, rel_y, world)` builds one. It falls back to a shield bearer for kinds without their own class.
- `keepwarden.enemy_states`: `EnemyStateParams`, `RunningEnemy` and `AttackingEnemy`.
- `keepwarden.archer_states`: `ArcherStateParams`, `IdleArcher` and `PlayAnimation`.
  - An archer on a tower picks the first live enemy in range from the tower's queue.
  - It plays its shot, then fires through a `launch_arrow` callback.

## Example

```python
from keepwarden.timer import Timer

timer = Timer()
state = {"x": 0.0}
timer.tween(1.0, state, {"x": 100.0}, "in-out-quad", lambda: print("done"), "", {})
for _ in range(4):
    timer.update(0.25)
print(state["x"])  # 100.0
```

## What the package does not do

This is a library of game logic only.

- It opens no window, draws no pixels, plays no sound and reads no input.
- It has no physics engine, no game loop and no command to start a game.
- Enemies, castles, defense towers, arrows and the tower offers themselves are not defined here.

The states and warriors work with objects you provide. A `Warrior` takes a `world` object for colliders, formation fixtures, corpses, blood particles and its `sprites`. `TowerSpawn` takes a factory for tower offers. The archer states take the archer, its tower and an arrow launcher.

## Tests

```
pip install -e .[test]
pytest
```