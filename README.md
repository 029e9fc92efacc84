# coldet

Helpers for simulating spheres that move under gravity and touch planes and
each other. They cover friction and damping, motion-state changes, collision
queue ordering, rotation bookkeeping and landing histograms. Vectors are
`numpy` arrays of length 3, or anything `numpy.asarray` accepts. Durations are
integer nanoseconds.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `coldet.timeconv`
  - `to_dt(duration_ns)` converts nanoseconds to seconds as a float.
  - `to_duration(dt)` converts a float number of microseconds to whole
    nanoseconds, truncating toward zero.
  - `time_diff(t1, t2)` returns `t1 - t2` as whole nanoseconds.
- `coldet.formatting`
  - `to_string(vec)` renders a vector as `[a, b, c]`. Integers are printed
    as they are and floats with six decimal places. An empty vector raises
    `ValueError`.
- `coldet.concepts`
  - The `State` enum has the members `FREE`, `RESTING`, `SLIDING` and
    `ROLLING`.
  - The runtime-checkable protocols are `SphereLike`, `PlaneLike`,
    `LimitedPlaneLike`, `CylinderLike`, `BezierSurfaceLike`, `DynamicBody`
    and `StatefulSphere`.
  - The predicates `is_sphere`, `is_plane`, `is_limited_plane`, `is_dynamic`
    and `has_states` check an object against these protocols.
- `coldet.energy`
  - `total_friction(mu1, mu2)` combines two friction coefficients.
  - `add_time_dependent_loss` damps a sliding or rolling sphere's velocity.
    It looks up the plane the sphere is attached to in an attachments
    mapping.
  - `add_time_independent_loss` reduces a velocity by a loss factor clamped
    to [0, 1].
  - `sliding_force` and `rolling_force` give the forces on a sphere.
  - `inertia(m, r)` gives the moment of inertia of a solid sphere.
  - `pre_tangential_acceleration`, `normal_acceleration`,
    `tangential_acceleration` and `total_rolling_acceleration` give the
    acceleration terms.
- `coldet.states`
  - The transition tests are `free_to_resting`, `free_to_sliding`,
    `resting_to_rolling`, `sliding_to_free` and the others of that form.
  - `rotation_axis(sphere)` gives a sphere's rotation axis.
  - `detect_state_change(sphere, plane, attachments, ds)` sets
    `sphere.state` and updates the attachments mapping in place. It returns
    the new state.
- `coldet.scenario`
  - `ScenarioView(constructor, solver)` holds a scenario behind a lock.
  - `construct()` builds the scenario and `solve(timestep)` advances it.
    Before `construct()` is called, `solve` does nothing and every count is
    zero.
  - The objects get one combined index: spheres first, then fixed planes,
    then fixed limited planes, then fixed Bezier surfaces. The counts come
    from the scenario's `spheres`, `fixed_planes`, `fixed_limited_planes`
    and `fixed_bezier_surfaces`.
  - `geometry_type(n)` returns a `GeometryType`, or `GeometryType.NA` when
    `n` is out of range.
- `coldet.collisions`
  - The records are `Collision(tp, sphere, other)` and
    `PairCollision(tp, first, second)`.
  - `sort_and_make_unique` and `sort_and_make_unique_pairs` sort a queue
    latest first. They keep only the earliest collision per sphere, or per
    unordered pair, with bodies told apart by identity.
  - `earliest_kind(queues)` names the queue whose next collision comes
    first.
- `coldet.rotation`
  - `set_rotation_normal` stores a normalised rotation normal on a sphere.
  - `rotation_axis` computes the rotation axis.
  - `update_rotation_speed` sets `sphere.rotation_speed` from the length of
    the axis, converted from degrees to radians.
- `coldet.distribution`
  - `Distribution` counts landing points in 50 unit-wide bins, from -25 to
    24, on the x and z axes.
  - `record(x, z)` counts a landing point and reports whether it was in
    range.
  - `total()` returns the number of landings counted.
  - `rows("x")` and `rows("z")` yield `(bin, count)` pairs.

## Example

```python
import numpy as np
from coldet.energy import inertia, total_friction
from coldet.states import free_to_resting
from coldet.timeconv import to_dt

to_dt(16_000_000)                 # 0.016
inertia(2.0, 0.5)                 # 0.2
total_friction(0.5, 0.4)          # 0.2

normal = np.array([0.0, 1.0, 0.0])
step = np.array([0.0, -1.0, 0.0])
free_to_resting(normal, step)     # True: the step goes straight into the plane
```

## What this package does not do

This package does not run simulations on its own.

- It has no rigid-body classes. Spheres and planes are any objects with the
  attributes the functions read, such as `point`, `radius`, `velocity`,
  `state`, `friction_coef`, `rotation_normal` and `normal`.
- It has no sphere-versus-plane or sphere-versus-sphere collision detection
  or impact response.
- It has no complete time-stepping solver. `ScenarioView` calls whatever
  solver you pass to it.
- It has no command-line tool, viewer or file storage.