# orbitcam

Camera and navigation math for interactive 3D viewers: vectors, quaternions,
rigid transforms, projection matrices, an orbiting camera, trackballs and
mouse state tracking.

## What is inside

- `orbitcam.vector`: immutable `Vec2` and `Vec3` with arithmetic, `dot`,
  `cross`, `norm`, `normalized`; `approx_equal` and `clamp`.
- `orbitcam.quaternion`: immutable `Quat` (`identity`, `from_vector`, `xyz`,
  `conj`, `inv`, `normalised`, products); `quat_pow` and `slerp`.
- `orbitcam.mat3`: `Mat3`, three column vectors, entries read as `m[i, j]`,
  with `column`, matrix product and `format`.
- `orbitcam.geometry`: `Ray`, `Plane`, `Sphere`, `Aabb` (union with `|`),
  `plane_from_normal_and_point`, `ray_plane_intersection` (returns a
  homogeneous `(xyz, w)` pair), `great_circle_rotation`, `triangle_normal`.
- `orbitcam.transform`: `RigidTransform` (rotation then translation, with
  `inv` and `as_matrix`), `rotate`, `unrotate`, `orbit`, `compose`,
  `transform_point`, `transform_vector4`.
- `orbitcam.linalg`: the abstract `Matrix` (subclasses implement `mvp`, and
  `A @ x` checks the vector length) and the vector helpers `axpy`, `axpby`,
  `dot`.
- `orbitcam.frustum`: `Frustum`, `CameraFrustum`, `nwd_to_ndc` and the
  perspective and orthographic projection matrices with their inverses.
- `orbitcam.hash_table`: an insert-only open-addressing `HashTable` with
  `get`, `get_or_set`, `set_at`, `reserve`, `clear` and `load_factor`.
- `orbitcam.camera`: `Camera`, `FovAxis`, `Space`, `Visibility`, and the
  frustum culling helpers `is_visible` and `visibility`.
- `orbitcam.trackball`: `ScreenTrackball`, `screen_trackball`,
  `world_trackball`.
- `orbitcam.mouse`: `Mouse` and `ButtonAction`.

## Example

```python
from orbitcam.camera import Camera
from orbitcam.trackball import ScreenTrackball
from orbitcam.vector import Vec3

camera = Camera(16 / 9, 60.0)
camera.position = Vec3(0.0, 0.0, 5.0)

ball = ScreenTrackball()
ball.grab(960, 540, 1920, 1080)
rotation, needs_reset = ball.drag(1000, 540, 1920, 1080)
camera.orbit(-rotation)

ray = camera.world_ray_at(0.5, 0.5)
print(ray.start, ray.dir)
```

## Conventions

All 4x4 matrices are numpy arrays indexed `m[row, column]`. Projection
matrices use a reversed-Z, zero-to-one depth range, and normalised window
coordinates have their origin at the top left corner. Invalid input, such as
screen coordinates outside `[0, 1]`, equal near and far planes or a
non-unit rotation quaternion, raises `ValueError`.

## What it does not do

The package opens no window, draws nothing, compiles no shaders and runs no
event loop. It provides the math and state a viewer needs; feeding it pointer
events and using its matrices for rendering is left to the calling
application.