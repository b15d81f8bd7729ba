# examples/minimal_drop.py
from particle_sim import World, Particle, IntegratorType, SimulationConfig

world = World(600, 400, 400, SimulationConfig(gravity=9.8, restitution=0.8, time_step=1/240))

ball = Particle(
    position=(300.0, 100.0, 200.0),
    velocity=(0.0, 0.0, 0.0),
    mass=1.0,
    radius=10.0,
)
world.add_particle(ball, IntegratorType.RK4)

t_end = 1.0
while world.time < t_end:
    world.step()

print("t:", world.time)
print("pos:", world.particles[0].position)
print("vel:", world.particles[0].velocity)
