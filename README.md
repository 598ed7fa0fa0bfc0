# jumpin

A small jumping game. The jumper falls under gravity and can be tilted with
the arrow keys. When its base touches a block it jumps off along its tilt;
when its head touches a block the round is lost; reaching the goal flag wins.
Stages are read from CSV files.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
jumpin
jumpin --resources path/to/game
```

`--resources` names the directory that holds the `Resources` folder
(default: the current directory). The window is 1280×720 and shows the
frame rate in the top-left corner.

| Scene        | Keys                                                   |
|--------------|--------------------------------------------------------|
| Title        | Space: go to stage select                              |
| Stage select | Up / Down: choose stage 1 or 2, Space: start it        |
| Game         | Left / Right (held): tilt the jumper                   |
| Result       | Space: back to the title, Enter: play the stage again  |

Minimising the window pauses the sound and the timer; restoring it resumes.

## Resources

Files are looked up below the `--resources` directory:

- `Resources/Models/` – `JumpinPlayer.sdkmesh`, `block.sdkmesh`, `flag.sdkmesh`.
  These must exist; the game stops with `FileNotFoundError` otherwise.
- `Resources/Dds/` – screen images (`title.dds`, `titleback.dds`,
  `pressspace.dds`, `arrow.dds`, `stage1.dds`, `stage2.dds`, `clear.dds`,
  `clearback.dds`, `gameover.dds`, `gameoverback.dds`, `guide.dds`).
  An image pygame cannot load is simply not drawn.
- `Resources/Sounds/` – `jump.wav`, `gamebgm.wav`, `death.wav`, `titlebgm.wav`,
  `decide.wav`, `btn.wav`, `clear.wav`, `gameover.wav`. A missing sound, or no
  audio device, plays as silence.
- `Resources/Data/stage<N>.csv` – stage layouts.

A stage file starts with a line holding the grid width and height separated by
a comma, followed by one comma-separated row per grid line. `1` is a block,
`2` is the goal, `0` is empty. The first cell sits at (-5, 15) and each cell
is two units wide and tall, rows going downwards.

```
4,3
1,0,0,2
0,0,0,1
1,1,1,1
```

## What it does not do

Models are not read or rendered from their files: every model, the jumper
included, is drawn as a white wireframe cube through a perspective camera.
There is no logo screen in the game's scene flow (`menu_scenes.LogoScene`
exists but does nothing), and the `DebugCamera` the game creates is not used
for drawing.

## Using the pieces

- `jumpin.steptimer` – `StepTimer` (fixed or variable time step, `tick`,
  `reset_elapsed_time`), `ticks_to_seconds`, `seconds_to_ticks`.
- `jumpin.geometry` – `Vector3`, `Matrix` (rotations, translation, scaling,
  `look_at`, `perspective_fov`, `invert`, `@`) and a look-at `Camera`.
- `jumpin.colliders` – `BoxCollider`, `CapsuleCollider`, `Axis`,
  `collide_boxes` and `sphere_hits_box`.
- `jumpin.debug_draw` – `Primitive`s of `Vertex`es for spheres, boxes,
  oriented boxes, frustums, grids, rings, rays, triangles and quads.
- `jumpin.debug_camera` – `DebugCamera` orbiting the origin from `MouseState`s.
- `jumpin.scene_manager` – `Scene`, `SceneManager` (named scenes, deferred
  scene changes, shared string data), `KeyboardState`, `KeyboardTracker`.
- `jumpin.resources` – caching `ResourceManager` and `Sound`.
- `jumpin.objects` – `Block`, `Goal`, `Player`.
- `jumpin.stage` – `Stage`, `StageType`, `TileType` and `parse_grid`.
- `jumpin.menu_scenes`, `jumpin.game_scene` – the scenes; `capsule_hits_box`.
- `jumpin.game` – `Game` and the `main` command.