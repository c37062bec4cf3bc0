from dino_runner.config import GameConfig
from dino_runner.data_models import Character, Obstacle
from dino_runner.physics_core import PhysicsCore


def test_grounded_character_stays_on_ground(physics, config):
    character = physics.step_character(Character(y=config.ground_y))
    assert character == Character(y=config.ground_y, velocity=0.0, airborne=False)


def test_jump_from_ground(physics, config):
    character = physics.step_character(Character(y=config.ground_y), jump=True)
    assert character.y == 182
    assert character.velocity == -17.5
    assert character.airborne


def test_jump_while_airborne_is_ignored(physics):
    airborne = Character(y=150, velocity=-5.0, airborne=True)
    assert physics.step_character(airborne, jump=True) == physics.step_character(airborne)


def test_landing_clamps_to_ground(physics, config):
    character = physics.step_character(Character(y=195, velocity=12.0, airborne=True))
    assert character == Character(y=config.ground_y, velocity=0.0, airborne=False)


def test_full_jump_arc_returns_to_ground(physics, config):
    character = physics.step_character(Character(y=config.ground_y), jump=True)
    apex = character.y
    ticks = 1
    while character.airborne:
        character = physics.step_character(character)
        assert character.y <= config.ground_y
        apex = min(apex, character.y)
        ticks += 1
        assert ticks < 200

    assert character.y == config.ground_y
    assert character.velocity == 0.0
    # 18 + 17.5 + ... + 0.5
    assert config.ground_y - apex == 333


def test_custom_gravity_is_used():
    physics = PhysicsCore(GameConfig(gravity=2.0))
    character = physics.step_character(Character(y=200), jump=True)
    assert character.velocity == -16.0


def test_overlapping_obstacle_collides(physics, config):
    grounded = Character(y=config.ground_y)
    assert physics.check_collision(grounded, [Obstacle(x=80, y=config.ground_y)])


def test_touching_edges_do_not_collide(physics, config):
    grounded = Character(y=config.ground_y)
    # Obstacle starting at the character's right edge
    assert not physics.check_collision(grounded, [Obstacle(x=100, y=config.ground_y)])
    # Obstacle ending at the character's left edge
    assert not physics.check_collision(grounded, [Obstacle(x=40, y=config.ground_y)])


def test_character_above_obstacle_does_not_collide(physics, config):
    obstacles = [Obstacle(x=80, y=config.ground_y)]
    assert not physics.check_collision(Character(y=160, airborne=True), obstacles)
    assert physics.check_collision(Character(y=161, airborne=True), obstacles)


def test_any_obstacle_is_enough(physics, config):
    obstacles = [Obstacle(x=300, y=config.ground_y), Obstacle(x=70, y=config.ground_y)]
    assert physics.check_collision(Character(y=config.ground_y), obstacles)


def test_no_obstacles_no_collision(physics, config):
    assert not physics.check_collision(Character(y=config.ground_y), [])
