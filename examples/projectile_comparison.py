# examples/projectile_comparison.py
# Euler vs RK4 on the same projectile, sampled every 5 steps.
import logging

from particle_sim import World, SimulationConfig
from particle_sim.sampling import SampleRecorder
from particle_sim.scenarios import setup_projectile_comparison

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

world = World(600, 400, 400, SimulationConfig(gravity=9.8, restitution=0.8, time_step=0.016))
euler, rk4 = setup_projectile_comparison(world)
recorder = SampleRecorder(world, every=5, maxlen=100)

for _ in range(250):
    world.step()
    recorder.record()

cols = recorder.as_arrays()
for t, ye, yr, ee, er in zip(cols["time"], cols["position_y_euler"], cols["position_y_rk4"],
                             cols["energy_euler"], cols["energy_rk4"]):
    print(f"t={t:6.3f}  h_euler={ye:8.3f}  h_rk4={yr:8.3f}  E_euler={ee:10.2f}  E_rk4={er:10.2f}")

print("final height gap:", abs(euler.position.y - rk4.position.y))
