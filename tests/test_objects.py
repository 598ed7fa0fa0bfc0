import math

import pytest

from jumpin.geometry import Vector3
from jumpin.objects import Block, Goal, Player
from jumpin.scene_manager import KeyboardState, KeyboardTracker


class FakeChannel:
    def __init__(self):
        self.volume = None
        self.stopped = False

    def set_volume(self, volume):
        self.volume = volume

    def stop(self):
        self.stopped = True


class FakeEffect:
    def __init__(self):
        self.plays = []

    def play(self, loops=0):
        self.plays.append(loops)
        return FakeChannel()


class FakeResources:
    def __init__(self):
        self.effects = {}
        self.model_requests = []

    def request_model(self, filename):
        self.model_requests.append(filename)
        return f"model:{filename}"

    def request_sound(self, filename):
        return self.effects.setdefault(filename, FakeEffect())


def make_player():
    resources = FakeResources()
    player = Player()
    player.initialize(resources)
    return player, resources


def test_block_initialize_sets_collider():
    block = Block()
    position = Vector3(3.0, -4.0, 0.0)
    block.initialize("cube", position)
    assert block.model == "cube"
    assert block.collider.center == position
    assert block.collider.half_size == Block.LENGTH / 2
    assert block.rotation_z == 0.0


def test_block_without_keys_stays_put():
    block = Block()
    block.initialize(None, Vector3(1.0, 2.0, 3.0))
    block.update(0.5, KeyboardState())
    assert tuple(block.position) == pytest.approx((1.0, 2.0, 3.0))


def test_block_up_moves_up():
    block = Block()
    block.initialize(None, Vector3())
    block.update(1.0, KeyboardState(up=True))
    assert tuple(block.position) == pytest.approx((0.0, 0.8, 0.0))
    assert block.collider.center == block.position


def test_block_up_and_down_cancel():
    block = Block()
    block.initialize(None, Vector3())
    block.update(1.0, KeyboardState(up=True, down=True))
    assert tuple(block.position) == pytest.approx((0.0, 0.0, 0.0))


def test_block_left_and_right_turn_by_one_degree():
    block = Block()
    block.initialize(None, Vector3())
    block.update(1.0, KeyboardState(left=True))
    assert block.rotation_z == pytest.approx(math.radians(1.0))
    block.update(1.0, KeyboardState(right=True))
    block.update(1.0, KeyboardState(right=True))
    assert block.rotation_z == pytest.approx(-math.radians(1.0))


def test_block_turned_motion_keeps_speed():
    block = Block()
    block.initialize(None, Vector3())
    for _ in range(30):
        block.update(0.0, KeyboardState(left=True))
    block.update(1.0, KeyboardState(up=True))
    assert block.position.length() == pytest.approx(Block.STEP_SPEED)
    assert block.position.x < 0.0


def test_block_world_matrix_places_origin_at_position():
    block = Block()
    block.initialize(None, Vector3(-5.0, 15.0, 0.0))
    origin = Vector3().transform(block.world_matrix())
    assert tuple(origin) == pytest.approx((-5.0, 15.0, 0.0))


def test_goal_initialize_and_update():
    goal = Goal()
    position = Vector3(7.0, -3.0, 0.0)
    goal.initialize("flag", position)
    assert goal.model == "flag"
    assert goal.collider.half_size == Vector3(1.0, 1.0, 1.0)
    goal.collider.center = Vector3()
    goal.update(0.1)
    assert goal.collider.center == position
    origin = Vector3().transform(goal.world_matrix())
    assert tuple(origin) == pytest.approx((7.0, -3.0, 0.0))


def test_player_initialize_requests_resources():
    player, resources = make_player()
    assert resources.model_requests == ["JumpinPlayer.sdkmesh"]
    assert "jump.wav" in resources.effects
    assert player.position == Vector3()
    assert player.collider.vector == Vector3(0.0, 3.5, 0.0)
    assert player.collider.radius == 1.0


def test_player_falls_under_gravity():
    player, _ = make_player()
    tracker = KeyboardTracker()
    tracker.update(KeyboardState())
    player.update(1.0, tracker)
    assert player.velocity.y == pytest.approx(-15.7)
    assert player.position.y == pytest.approx(-15.7)
    assert player.collider.start == player.position


def test_player_turns_while_left_held():
    player, _ = make_player()
    tracker = KeyboardTracker()
    tracker.update(KeyboardState(left=True))
    player.update(0.5, tracker)
    assert player.rotation_z == pytest.approx(math.radians(120.0) * 0.5)
    assert player.collider.rotation.z == player.rotation_z


def test_player_jump_straight_up_plays_sound():
    player, resources = make_player()
    player.jump()
    assert tuple(player.velocity) == pytest.approx((0.0, 14.0, 0.0))
    assert resources.effects["jump.wav"].plays == [0]


def test_player_tilted_jump_keeps_strength():
    player, _ = make_player()
    tracker = KeyboardTracker()
    tracker.update(KeyboardState(right=True))
    player.update(0.25, tracker)
    player.jump()
    assert player.velocity.length() == pytest.approx(Player.JUMP.length())
    assert player.velocity.x > 0.0


def test_player_capsule_end_after_update():
    player, _ = make_player()
    tracker = KeyboardTracker()
    tracker.update(KeyboardState())
    player.update(0.1, tracker)
    end = player.collider.end()
    expected = player.position + Vector3(0.0, 3.5, 0.0)
    assert tuple(end) == pytest.approx(tuple(expected))
    assert end.y - player.position.y == pytest.approx(3.5)


def test_player_jump_before_initialize_raises():
    with pytest.raises(RuntimeError):
        Player().jump()