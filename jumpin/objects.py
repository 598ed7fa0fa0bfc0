"""Game objects: stage blocks, the goal flag and the player."""

from __future__ import annotations

import math
from typing import Any, Protocol

from jumpin.colliders import BoxCollider, CapsuleCollider
from jumpin.geometry import Matrix, Vector3
from jumpin.resources import Sound
from jumpin.scene_manager import KeyboardState, KeyboardTracker


class ResourceSource(Protocol):
    def request_model(self, filename: str) -> Any: ...

    def request_sound(self, filename: str) -> Any: ...


class Block:
    """A cube of the stage; arrow keys move and turn it."""

    LENGTH = Vector3(2.0, 2.0, 2.0)
    STEP_SPEED = 0.8
    TURN_STEP = math.radians(1.0)

    def __init__(self) -> None:
        self.model: Any = None
        self.position = Vector3()
        self.velocity = Vector3()
        self.rotation_z = 0.0
        self.collider = BoxCollider()

    def initialize(self, model: Any, position: Vector3) -> None:
        """Place the block and size its collider to the block's extent."""
        self.model = model
        self.position = position
        self.rotation_z = 0.0
        self.collider = BoxCollider(position, self.LENGTH / 2)

    def update(self, elapsed_time: float, key: KeyboardState) -> None:
        """Turn with left/right, move along the turned Y axis with up/down."""
        speed = 0.0
        if key.left:
            self.rotation_z += self.TURN_STEP
        if key.right:
            self.rotation_z -= self.TURN_STEP
        if key.up:
            speed += self.STEP_SPEED
        if key.down:
            speed -= self.STEP_SPEED
        self.velocity = Vector3(0.0, speed, 0.0)
        moved = self.velocity.transform(Matrix.rotation_z(self.rotation_z))
        self.position = self.position + moved * elapsed_time
        self.collider.center = self.position

    def world_matrix(self) -> Matrix:
        """Scale, then rotate about Z, then translate to the position."""
        return (
            Matrix.scaling(1.0, 1.0, 1.0)
            @ Matrix.rotation_z(self.rotation_z)
            @ Matrix.translation(self.position)
        )


class Goal:
    """The flag that ends a stage when the player reaches it."""

    HALF_SIZE = Vector3(1.0, 1.0, 1.0)

    def __init__(self) -> None:
        self.model: Any = None
        self.position = Vector3()
        self.collider = BoxCollider()

    def initialize(self, model: Any, position: Vector3) -> None:
        self.model = model
        self.position = position
        self.collider = BoxCollider(position, self.HALF_SIZE)

    def update(self, elapsed_time: float) -> None:
        """Keep the collider on the goal's position."""
        self.collider.center = self.position

    def world_matrix(self) -> Matrix:
        return Matrix.scaling(1.0, 1.0, 1.0) @ Matrix.translation(self.position)


class Player:
    """The jumping player: falls under gravity, tilts with left/right."""

    JUMP = Vector3(0.0, 14.0, 0.0)
    GRAVITY = -15.7
    RADIUS = 1.0
    BODY = Vector3(0.0, 3.5, 0.0)
    TURN_SPEED = math.radians(120.0)
    MODEL_FILE = "JumpinPlayer.sdkmesh"
    JUMP_SOUND_FILE = "jump.wav"

    def __init__(self) -> None:
        self.model: Any = None
        self.position = Vector3()
        self.velocity = Vector3()
        self.rotation_z = 0.0
        self.gravity = Vector3()
        self.collider = CapsuleCollider()
        self.jump_sound: Sound | None = None

    def initialize(self, resources: ResourceSource) -> None:
        """Fetch the model and jump sound and reset to the origin."""
        self.model = resources.request_model(self.MODEL_FILE)
        self.jump_sound = Sound(resources.request_sound(self.JUMP_SOUND_FILE))
        self.position = Vector3()
        self.velocity = Vector3()
        self.rotation_z = 0.0
        self.gravity = Vector3(0.0, self.GRAVITY, 0.0)
        self.collider = CapsuleCollider(self.position, self.BODY, self.RADIUS)

    def update(self, elapsed_time: float, tracker: KeyboardTracker) -> None:
        """Turn while left/right are held, then apply gravity and velocity."""
        held = tracker.last_state
        if held.left:
            self.rotation_z += self.TURN_SPEED * elapsed_time
        if held.right:
            self.rotation_z -= self.TURN_SPEED * elapsed_time

        self.velocity = self.velocity + self.gravity * elapsed_time
        self.position = self.position + self.velocity * elapsed_time

        self.collider.start = self.position
        self.collider.rotation = Vector3(0.0, 0.0, self.rotation_z)

    def jump(self) -> None:
        """Launch along the player's tilted up direction and play the sound."""
        if self.jump_sound is None:
            raise RuntimeError("player is not initialized")
        self.velocity = self.JUMP.transform(Matrix.rotation_z(self.rotation_z))
        self.jump_sound.play(False)

    def world_matrix(self) -> Matrix:
        return (
            Matrix.scaling(1.0, 1.0, 1.0)
            @ Matrix.rotation_z(self.rotation_z)
            @ Matrix.translation(self.position)
        )