# tachyon

A small physics engine written in pure Python with no dependencies. It has
these parts:

- 3D vector and matrix maths and quaternions.
- Point particles with force generators and integrators.
- Rigid bodies (spheres and boxes). Rigid bodies come with a uniform-grid
  broadphase, narrow-phase contact generation and impulse-based contact
  resolution.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo world

```
tachyon
```

This command builds a `World` of randomly placed spheres and boxes. The bodies
fall under gravity inside a boundary of ±10 units in x and y, and bounce off
its edges. The command steps the world with a fixed time step and prints the
average frame time and FPS every 100 frames.

Options:

- `--frames N`: number of frames to simulate. Default 1000.
- `--dt SECONDS`: time step. Default 0.008. Must be positive.
- `--spheres N`, `--boxes N`: body counts. Default 10 each.
- `--seed N`: random seed for body placement. Default 44.

The same run from Python is `tachyon.world.main(["--frames", "200"])`.

## Using the library

```python
from tachyon.vec3 import Vec3
from tachyon.shapes import Sphere
from tachyon.contact_generator import ContactGenerator
from tachyon.contact_resolver import ContactResolver

a = Sphere(1.0, 1.0)   # radius, mass
b = Sphere(1.0, 1.0)
a.pos = Vec3(-0.9, 0.0, 0.0)
b.pos = Vec3(0.9, 0.0, 0.0)
a.vel = Vec3(2.0, 0.0, 0.0)
b.vel = Vec3(-2.0, 0.0, 0.0)
a.calculate_derived_data()
b.calculate_derived_data()

contacts = ContactGenerator().generate_contacts([(a, b)])
ContactResolver().resolve_contacts_simple(contacts, 1.0)
print(a.vel, b.vel)
```

### Modules

- `tachyon.vec3`: `Vec3`. Supports `+`, `-`, unary `-`, multiplication and
  division by a scalar, indexing and iteration. Methods include `dot`, `cross`,
  `magnitude`, `normalize` and `normalized`.
- `tachyon.matrix3`: `Matrix3`, a row-major 3×3 matrix. It provides
  `transpose`, `determinant` and `inverse`. `inverse` returns the zero matrix
  when the matrix is near singular. Multiply with `m @ v` or `m @ n`.
- `tachyon.matrix4`: `Matrix4`, an affine transform. It provides
  `from_transform(q, pos)`, `transform_direction`, `m @ v` and
  `to_opengl_array`, which returns the entries in column-major order.
- `tachyon.quaternion`: `Quaternion`. It provides `from_axis_angle`, `rotate`,
  `integrate_angular_velocity` and `to_matrix3`.
- `tachyon.precision`: constants such as `PI`, `TAU` and `REAL_EPSILON`, and
  `is_valid`.
- `tachyon.particle`: `Particle`. It has a force accumulator, a `mass`
  property and damped Euler `integrate`. `to_gpu` returns a flat
  `GpuParticle` snapshot of its state.
- `tachyon.particle_integrator`: `EulerParticleIntegrator` and
  `VerletParticleIntegrator`. Both raise `ValueError` for a non-positive time
  step.
- `tachyon.point_particle`: `PointParticle`, a compact particle used by the
  force functions.
- `tachyon.forces`: force functions that act on a `PointParticle`:
  - `apply_gravity`
  - `apply_drag`
  - `apply_spring`
  - `apply_anchored_spring`
  - `apply_bungee`
  - `apply_buoyancy`
  - `apply_explosion`
  - `apply_pairwise_gravity`

  The module also holds the `ForceType` and `ForceEntry` records.
- `tachyon.float3`: free vector helpers (`add`, `sub`, `scale`, `normalize`,
  `clamp`, `lerp`, …).
- `tachyon.rigid_body`: `RigidBody` and `ShapeType`. It covers force and
  torque accumulation, integration, and local/world conversion.
- `tachyon.shapes`: `Sphere`, `Box`, and `create_wall`, which builds an
  immovable box.
- `tachyon.grid`: `BroadphaseGrid`. It buckets bodies by cell and returns
  candidate pairs.
- `tachyon.contact`: the `Contact` record.
- `tachyon.contact_generator`: `ContactGenerator`. It handles sphere–sphere,
  sphere–box and box–box pairs.
- `tachyon.contact_resolver`: `ContactResolver`. It offers simple and
  iterative resolution: the iterative one resolves the deepest contact first,
  and resolves each contact at most 5 times.
- `tachyon.world`: `World` and the `main` entry point.

## What it does not do

- Nothing is drawn. There is no window or renderer. `Matrix4.to_opengl_array`
  only gives the numbers a renderer would need.
- `ForceEntry` records describe forces, but no function walks a list of them.
  Call the `apply_*` functions in `tachyon.forces` yourself.
- There is no Runge–Kutta particle integrator; only Euler and Verlet are
  provided.