# springbox

A small interactive 2D physics sandbox. You drop circular bodies into a world
and join them with springs. The world moves them with a semi-implicit
integrator and resolves their collisions with impulses. It can also apply
gravitation between every pair of bodies.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window.

## Running

```
springbox
```

The window is 1280 by 720 pixels and runs at up to 60 frames per second. The
physics advances in fixed steps of 1/60 s. A frame adds at most half a second
of time to the physics. Escape or closing the window quits.

Options:

- `--scene {polar,spring,trig,vector}` picks the scene (default `spring`).
- `--frames N` stops after `N` frames.

On start the program looks for a `resources` directory. It checks the working
directory first, then the program's directory and up to three levels above
it. If it finds one, it makes that the working directory.

### The spring scene

- **Left click** creates a body at the cursor and launches it in a random
  direction. Hold **Left Ctrl** while holding the left button to create one
  every frame.
- **Right click** on a body selects it. Keep the right button down and move
  over another body to pick it. Release the button to join the two with a
  spring whose rest length is their current distance.
- **Left Ctrl + right button** held on a selected dynamic body pulls it
  toward the cursor.
- **Space** pauses or resumes the simulation.
- **Tab** shows or hides the physics panel.
- Bodies stop at a floor at y = -5 and a wall at x = -9, where they bounce.

The physics panel has sliders for the values that new bodies and springs use:
mass, size, gravity scale, damping, restitution and spring stiffness. It also
has sliders for the world's gravitation, spring stiffness multiplier and
vertical gravity. A body type dropdown offers Dynamic, Kinematic or Static,
and a Simulate toggle pauses the world.

### The other scenes

- `vector`: a left click bursts 100 particles at the cursor. They fall and
  bounce on the floor at y = -5. Space pauses. The panel is shown and its
  controls work, but Tab does not hide it here.
- `trig`: a rotating ring of dots, with sine and cosine waves.
- `polar`: a limaçon and a rose curve turning slowly.

## Using the library

The simulation runs without a window:

```python
from springbox.body import BodyType
from springbox.vecmath import Vec2
from springbox.world import World

world = World(Vec2(0, -9.81), 30)
a = world.create_body(BodyType.DYNAMIC, Vec2(0, 0), 1.0, 0.5, (255, 0, 0, 255))
b = world.create_body(BodyType.STATIC, Vec2(0, 3), 1.0, 0.5, (0, 0, 255, 255))
world.create_spring(a, b, 2.0, 15.0, 0.5)

for _ in range(60):
    world.step(1 / 60)

print(a.position)
```

`World.gravity` is shared by every body, so setting it on one world changes
it for all of them. `World.step` does nothing while `world.simulate` is
false. It applies gravitation when `world.gravitation` is above zero.

Modules:

- `springbox.vecmath`: `Vec2`, colour constants, `randomf`, `deg_to_rad`,
  `rad_to_deg`, `random_on_unit_circle` and `color_from_hsv`
- `springbox.polar`: `Polar` coordinates
- `springbox.aabb`: `AABB` boxes
- `springbox.body`: `Body`, `BodyType`, `ForceMode`, `explicit_integrator`
  and `semi_implicit_integrator`
- `springbox.collision`: `Contact`, `create_contacts`, `separate_contacts`,
  `resolve_contacts` and `intersects`
- `springbox.grav`: `apply_gravitation`
- `springbox.spring`: `Spring`, `pull_toward` and `pull_toward_damped`
- `springbox.world`: `World`
- `springbox.camera`: `SceneCamera`, which converts between world and screen
  space
- `springbox.resource_dir`: `search_and_set_resource_dir`
- `springbox.gui`: `GuiState`, the physics panel, and `get_body_intersect`
- `springbox.scene`: `Scene` and `FrameInput`
- `springbox.scenes`: `TrigScene`, `PolarScene`, `VectorScene`,
  `SpringScene` and the curve generators `archimedean_spiral`, `cardioid`,
  `limacon`, `rose_curve` and `fermat_spiral`
- `springbox.app`: `main` and `fixed_steps`

## Behaviour to be aware of

- `apply_force` adds the vector to the force accumulator in every mode. It
  does this as well as the impulse or velocity change.
- `apply_gravitation` always uses the lower distance bound of 5. The force
  does not depend on how far apart the bodies are.
- `pull_toward_damped` accepts a damping value but does not use it.
- Scenes cannot be saved or loaded. Everything placed in the world is lost
  when the window closes.