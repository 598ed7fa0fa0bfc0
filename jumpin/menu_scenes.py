"""Title, stage select, result and logo scenes."""

from __future__ import annotations

import math
from typing import Any, Protocol

from jumpin.geometry import Camera, Matrix, Vector3
from jumpin.resources import Sound
from jumpin.scene_manager import KeyboardTracker, Scene, SceneManager
from jumpin.stage import StageType

DECIDE_SOUND = "decide.wav"
TITLE_BGM = "titlebgm.wav"
SELECT_SOUND = "btn.wav"
CLEAR_SOUND = "clear.wav"
GAMEOVER_SOUND = "gameover.wav"
PLAYER_MODEL = "JumpinPlayer.sdkmesh"

MENU_BGM_VOLUME = 0.3
TITLE_SPIN_SPEED = math.radians(36.0)


class MenuResources(Protocol):
    def request_texture(self, filename: str) -> Any: ...

    def request_sound(self, filename: str) -> Any: ...

    def request_model(self, filename: str) -> Any: ...


class Renderer(Protocol):
    def draw_sprite(self, texture: Any, position: tuple[float, float]) -> None: ...

    def draw_model(self, model: Any, world: Matrix, view: Matrix) -> None: ...


class TitleScene(Scene):
    """Title screen with a spinning player model; space moves on."""

    def __init__(self, manager: SceneManager, resources: MenuResources) -> None:
        super().__init__(manager)
        self._resources = resources
        self.camera = Camera()
        self.decide_sound = Sound(resources.request_sound(DECIDE_SOUND))
        self.bgm = Sound(resources.request_sound(TITLE_BGM))
        self.title_texture: Any = None
        self.back_texture: Any = None
        self.press_texture: Any = None
        self.model: Any = None
        self.rotation_y = 0.0

    def initialize(self) -> None:
        self.title_texture = self._resources.request_texture("title.dds")
        self.back_texture = self._resources.request_texture("titleback.dds")
        self.press_texture = self._resources.request_texture("pressspace.dds")
        self.model = self._resources.request_model(PLAYER_MODEL)
        self.camera.initialize(Vector3(0.0, 5.0, 10.0))
        self.bgm.set_volume(MENU_BGM_VOLUME)
        self.bgm.play(True)

    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        if tracker.pressed.space:
            self.bgm.stop()
            self.decide_sound.play(False)
            self.change_scene("StageSelect")
        self.rotation_y += TITLE_SPIN_SPEED * elapsed_time
        self.camera.update(Vector3(0.0, 2.0, 0.0))

    def world_matrix(self) -> Matrix:
        """Scale, spin about Y, then lower the model by one unit."""
        return (
            Matrix.scaling(1.0, 1.0, 1.0)
            @ Matrix.rotation_y(self.rotation_y)
            @ Matrix.translation(Vector3(0.0, -1.0, 0.0))
        )

    def render(self, renderer: Renderer) -> None:
        renderer.draw_sprite(self.back_texture, (0, 0))
        renderer.draw_sprite(self.title_texture, (150, 0))
        renderer.draw_sprite(self.press_texture, (150, 600))
        renderer.draw_model(self.model, self.world_matrix(), self.camera.view)

    def finalize(self) -> None:
        """Nothing to release."""


class StageSelectScene(Scene):
    """Choose a stage with up/down and start it with space."""

    def __init__(self, manager: SceneManager, resources: MenuResources) -> None:
        super().__init__(manager)
        self._resources = resources
        self.decide_sound = Sound(resources.request_sound(DECIDE_SOUND))
        self.bgm = Sound(resources.request_sound(TITLE_BGM))
        self.select_sound = Sound(resources.request_sound(SELECT_SOUND))
        self.title_texture: Any = None
        self.back_texture: Any = None
        self.press_texture: Any = None
        self.arrow_texture: Any = None
        self.stage1_texture: Any = None
        self.stage2_texture: Any = None
        self.selected_stage = int(StageType.STAGE1)

    def initialize(self) -> None:
        self.title_texture = self._resources.request_texture("title.dds")
        self.back_texture = self._resources.request_texture("titleback.dds")
        self.press_texture = self._resources.request_texture("pressspace.dds")
        self.arrow_texture = self._resources.request_texture("arrow.dds")
        self.stage1_texture = self._resources.request_texture("stage1.dds")
        self.stage2_texture = self._resources.request_texture("stage2.dds")
        self.selected_stage = int(StageType.STAGE1)
        self.bgm.set_volume(MENU_BGM_VOLUME)
        self.bgm.play(True)

    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        if tracker.pressed.space:
            self.bgm.stop()
            self.decide_sound.play(False)
            self.write_shared("stage", int(self.selected_stage))
            self.change_scene("Game")

        if tracker.pressed.up:
            self.selected_stage -= 1
            self.select_sound.play(False)
        elif tracker.pressed.down:
            self.selected_stage += 1
            self.select_sound.play(False)

        if self.selected_stage <= StageType.NONE:
            self.selected_stage = int(StageType.STAGE1)
        elif self.selected_stage >= StageType.NUM:
            self.selected_stage = int(StageType.STAGE2)

    def render(self, renderer: Renderer) -> None:
        renderer.draw_sprite(self.back_texture, (0, 0))
        renderer.draw_sprite(self.arrow_texture, (300, 200 * self.selected_stage))
        renderer.draw_sprite(self.stage1_texture, (400, 200))
        renderer.draw_sprite(self.stage2_texture, (400, 400))

    def finalize(self) -> None:
        """Nothing to release."""


class ResultScene(Scene):
    """Shows clear or game over; space returns to the title, enter retries."""

    def __init__(self, manager: SceneManager, resources: MenuResources) -> None:
        super().__init__(manager)
        self._resources = resources
        self.clear_sound = Sound(resources.request_sound(CLEAR_SOUND))
        self.gameover_sound = Sound(resources.request_sound(GAMEOVER_SOUND))
        self.back_texture: Any = None
        self.result_texture: Any = None
        self.press_texture: Any = None
        self.is_clear = False

    def initialize(self) -> None:
        self.is_clear = self.read_shared("result", bool)
        if self.is_clear:
            self.back_texture = self._resources.request_texture("clearback.dds")
            self.result_texture = self._resources.request_texture("clear.dds")
            self.clear_sound.play(False)
        else:
            self.back_texture = self._resources.request_texture("gameoverback.dds")
            self.result_texture = self._resources.request_texture("gameover.dds")
            self.gameover_sound.play(False)
        self.press_texture = self._resources.request_texture("guide.dds")

    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        if tracker.pressed.space:
            self._stop_sounds()
            self.change_scene("Title")
        elif tracker.pressed.enter:
            self._stop_sounds()
            self.change_scene("Game")

    def _stop_sounds(self) -> None:
        self.clear_sound.stop()
        self.gameover_sound.stop()

    def render(self, renderer: Renderer) -> None:
        renderer.draw_sprite(self.back_texture, (0, 0))
        renderer.draw_sprite(self.result_texture, (300, 50))
        renderer.draw_sprite(self.press_texture, (300, 400))

    def finalize(self) -> None:
        """Nothing to release."""


class LogoScene(Scene):
    """A logo screen that shows nothing and never moves on by itself."""

    def __init__(self, manager: SceneManager, resources: MenuResources) -> None:
        super().__init__(manager)
        self._resources = resources

    def initialize(self) -> None:
        """Nothing to prepare."""

    def update(self, tracker: KeyboardTracker, elapsed_time: float) -> None:
        """The logo has no behaviour of its own."""

    def render(self, renderer: Renderer) -> None:
        """The logo draws nothing."""

    def finalize(self) -> None:
        """Nothing to release."""