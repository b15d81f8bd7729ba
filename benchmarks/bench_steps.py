"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from particle_sim import World, Particle, IntegratorType, SimulationConfig
from particle_sim.profiler import Profiler

def run(n: int, steps: int = 300, method: IntegratorType = IntegratorType.RK4):
    prof = Profiler()
    world = World(
        600, 400, 400,
        SimulationConfig(gravity=9.8, restitution=0.8, time_step=1/240),
        profiler=prof,
    )

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn particles in a grid with small random jitter
    side = int(np.ceil(np.cbrt(n)))
    k = 0
    for iz in range(side):
        for iy in range(side):
            for ix in range(side):
                if k >= n:
                    break
                pos = (
                    60.0 + 30.0 * ix + float(rng.normal()),
                    60.0 + 30.0 * iy + float(rng.normal()),
                    60.0 + 30.0 * iz + float(rng.normal()),
                )
                world.add_particle(Particle(pos, (0.0, 0.0, 0.0), mass=1.0, radius=8.0), method)
                k += 1

    # warmup
    for _ in range(30):
        world.step()
    prof.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step()
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for method in IntegratorType:
        for n in [10, 50, 100, 250]:
            per_step, summary = run(n, method=method)
            print(f"{method.value:5s} N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
            for k in ["collisions", "integrate"]:
                if k in summary:
                    print(" ", k, summary[k])
            print()
