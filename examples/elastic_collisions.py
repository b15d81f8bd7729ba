# examples/elastic_collisions.py
# Twenty RK4 particles in a box, driven by a simulated 60 Hz frame loop.
import logging

from particle_sim import World, SimulationConfig, FixedStepDriver
from particle_sim.core.invariants import kinetic_energy, linear_momentum
from particle_sim.renderer import DebugRenderer
from particle_sim.scenarios import setup_elastic_collisions

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

world = World(600, 400, 400, SimulationConfig(gravity=9.8, restitution=0.8, time_step=0.016))
setup_elastic_collisions(world, count=20, seed=2024)
driver = FixedStepDriver(world)
renderer = DebugRenderer(verbose=False)

print("ke0", kinetic_energy(world.particles), "p0", linear_momentum(world.particles))

for frame in range(600):
    driver.advance(1 / 60)
    if frame % 120 == 0:
        renderer.render_world(world)

print("ke1", kinetic_energy(world.particles), "p1", linear_momentum(world.particles))
print(world)
