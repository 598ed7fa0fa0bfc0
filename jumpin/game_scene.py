"""The playing scene: the player bounces on blocks towards the goal."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from jumpin.colliders import BoxCollider, CapsuleCollider, sphere_hits_box
from jumpin.geometry import Camera, Matrix, Vector3
from jumpin.objects import Player
from jumpin.resources import Sound
from jumpin.scene_manager import KeyboardTracker, Scene, SceneManager
from jumpin.stage import Stage

GAME_BGM = "gamebgm.wav"
HIT_SOUND = "death.wav"
BGM_VOLUME = 0.5
CAMERA_START = Vector3(0.0, 3.0, 50.0)
CAMERA_TARGET_HEIGHT = 3.0


class GameResources(Protocol):
    def request_sound(self, filename: str) -> Any: ...

    def request_model(self, filename: str) -> Any: ...


class Renderer(Protocol):
    def draw_model(self, model: Any, world: Matrix, view: Matrix) -> None: ...


def capsule_hits_box(capsule: CapsuleCollider, box: BoxCollider) -> bool:
    """Approximate a capsule by the sphere at its start and test it against a box."""
    return sphere_hits_box(capsule.start, capsule.radius, box)


class GameScene(Scene):
    """Runs a stage: touching a block from above jumps, hitting it with the head ends."""

    def __init__(
        self,
        manager: SceneManager,
        resources: GameResources,
        data_dir: str | Path = ".",
    ) -> None:
        super().__init__(manager)
        self._resources = resources
        self.player = Player()
        self.camera = Camera()
        self.stage = Stage(data_dir)
        self.bgm = Sound(resources.request_sound(GAME_BGM))
        self.hit_block_sound = Sound(resources.request_sound(HIT_SOUND))

    def initialize(self) -> None:
        """Load the stage chosen in the shared data and start the music."""
        stage_type = self.read_shared("stage", int)
        self.player.initialize(self._resources)
        self.camera.initialize(CAMERA_START)
        self.stage.initialize(self._resources, stage_type)
        self.bgm.set_volume(BGM_VOLUME)
        self.bgm.play(True)

    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        self.player.update(elapsed_time, tracker)
        player_pos = self.player.position
        self.camera.update(Vector3(player_pos.x, CAMERA_TARGET_HEIGHT, player_pos.z))
        self.camera.position = Vector3(
            player_pos.x, self.camera.position.y, self.camera.position.z
        )

        for block in self.stage.blocks:
            capsule = self.player.collider
            if sphere_hits_box(capsule.start, capsule.radius, block.collider):
                self.player.jump()
            if sphere_hits_box(capsule.end(), capsule.radius, block.collider):
                self.hit_block_sound.play(False)
                self.bgm.stop()
                self.write_shared("result", False)
                self.change_scene("Result")

        goal = self.stage.goal
        if goal is not None and capsule_hits_box(self.player.collider, goal.collider):
            self.bgm.stop()
            self.write_shared("result", True)
            self.change_scene("Result")

    def render(self, renderer: Renderer) -> None:
        view = self.camera.view
        for block in self.stage.blocks:
            renderer.draw_model(block.model, block.world_matrix(), view)
        if self.stage.goal is not None:
            goal = self.stage.goal
            renderer.draw_model(goal.model, goal.world_matrix(), view)
        renderer.draw_model(self.player.model, self.player.world_matrix(), view)

    def finalize(self) -> None:
        self.stage.finalize()