"""
Редактор карт чертежа: состояние авторинга прямоугольников.

Состояние — одно значение одного из типов Idle / Drawing / PendingReview /
Editing / ConfirmingDelete, поэтому, например, рисовать при открытом
диалоге подтверждения невозможно по построению.

    Idle ──start_new_map──▶ Drawing ──pointer_up(draft)──▶ PendingReview
      ▲                        │ pointer_up(no draft)          │ confirm ok
      └────────────────────────┴───────────────────────────────┘
    Idle ──open_edit──▶ Editing ──confirm ok──▶ Idle
    Idle/Editing ──request_delete──▶ ConfirmingDelete ──confirm ok──▶ Idle
    любое ──cancel / Escape──▶ Idle
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Protocol, Union

from app_cracks.repositories import CrackRepository
from app_design_maps.exceptions import DesignMapException
from app_design_maps.geometry import Point, Rect
from app_design_maps.services import DesignMapService


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Drawing:
    start: Optional[Point] = None
    draft: Optional[Rect] = None


@dataclass(frozen=True)
class PendingReview:
    rect: Rect
    block_id: Optional[int] = None
    crack_id: Optional[int] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class Editing:
    map_id: int
    crack_id: Optional[int] = None
    block_id: Optional[int] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ConfirmingDelete:
    map_id: int
    error: Optional[str] = None


EditorState = Union[Idle, Drawing, PendingReview, Editing, ConfirmingDelete]


class InvalidTransition(Exception):
    def __init__(self, action: str, state: EditorState):
        self.action = action
        self.state = state
        super().__init__(f"{action} is not allowed in {type(state).__name__}")


class GatewayError(Exception):
    """Ошибка вызова API карт (текст показывается в диалоге)."""

    pass


class DesignMapGateway(Protocol):
    def list_maps(self) -> List[Dict[str, Any]]: ...

    def list_unmapped_cracks(self, block_id: Optional[int]) -> List[Dict[str, Any]]: ...

    def create_map(self, crack_id: int, rect: Rect) -> Dict[str, Any]: ...

    def update_map(self, map_id: int, crack_id: int) -> Dict[str, Any]: ...

    def delete_map(self, map_id: int) -> None: ...


class CoordinateEditor:
    """
    Автомат редактора. ``scale`` — текущий масштаб отрисовки изображения
    (экранных пикселей на пиксель изображения), ``origin`` — экранная
    позиция левого верхнего угла изображения.
    """

    SELECT_CRACK_MESSAGE = "Select a crack"

    def __init__(self, gateway: DesignMapGateway, scale: float = 1.0, origin: Point = Point(0, 0)):
        self.gateway = gateway
        self.scale = scale
        self.origin = origin
        self.state: EditorState = Idle()
        self.maps: List[Dict[str, Any]] = []

    def set_viewport(self, scale: float, origin: Point) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.scale = scale
        self.origin = origin

    def to_image_point(self, screen: Point) -> Point:
        return Point(
            x=(screen.x - self.origin.x) / self.scale,
            y=(screen.y - self.origin.y) / self.scale,
        )

    def refresh(self) -> List[Dict[str, Any]]:
        self.maps = self.gateway.list_maps()
        return self.maps

    def _require(self, action: str, *state_types) -> None:
        if not isinstance(self.state, state_types):
            raise InvalidTransition(action, self.state)

    # --- рисование ---

    def start_new_map(self) -> None:
        self._require("start_new_map", Idle)
        self.state = Drawing()

    def pointer_down(self, screen: Point) -> None:
        self._require("pointer_down", Drawing)
        self.state = Drawing(start=self.to_image_point(screen))

    def pointer_move(self, screen: Point) -> None:
        if isinstance(self.state, Drawing) and self.state.start is not None:
            draft = Rect.from_corners(self.state.start, self.to_image_point(screen))
            self.state = replace(self.state, draft=draft)

    def pointer_up(self) -> None:
        self._require("pointer_up", Drawing)
        if self.state.draft is None:
            self.state = Idle()
        else:
            self.state = PendingReview(rect=self.state.draft)

    # --- выбор трещины ---

    def select_block(self, block_id: Optional[int]) -> None:
        self._require("select_block", PendingReview, Editing)
        self.state = replace(self.state, block_id=block_id, crack_id=None, error=None)

    def available_cracks(self) -> List[Dict[str, Any]]:
        self._require("available_cracks", PendingReview, Editing)
        return self.gateway.list_unmapped_cracks(self.state.block_id)

    def select_crack(self, crack_id: int) -> None:
        self._require("select_crack", PendingReview, Editing)
        self.state = replace(self.state, crack_id=crack_id, error=None)

    # --- правка / удаление существующей карты ---

    def open_edit(self, map_id: int, crack_id: Optional[int] = None) -> None:
        self._require("open_edit", Idle)
        self.state = Editing(map_id=map_id, crack_id=crack_id)

    def request_delete(self, map_id: int) -> None:
        self._require("request_delete", Idle, Editing)
        self.state = ConfirmingDelete(map_id=map_id)

    # --- подтверждение / отмена ---

    def confirm(self) -> None:
        self._require("confirm", PendingReview, Editing, ConfirmingDelete)
        state = self.state

        if isinstance(state, (PendingReview, Editing)) and state.crack_id is None:
            self.state = replace(state, error=self.SELECT_CRACK_MESSAGE)
            return

        try:
            if isinstance(state, PendingReview):
                self.gateway.create_map(state.crack_id, state.rect)
            elif isinstance(state, Editing):
                self.gateway.update_map(state.map_id, state.crack_id)
            else:
                self.gateway.delete_map(state.map_id)
        except GatewayError as e:
            self.state = replace(state, error=str(e))
            return

        self.state = Idle()
        self.refresh()

    def cancel(self) -> None:
        self.state = Idle()

    def key_press(self, key: str) -> None:
        if key == "Escape":
            self.cancel()


class ServiceGateway:
    """Шлюз редактора поверх сервисов карт и трещин одного проекта."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        self.service = DesignMapService()
        self.cracks = CrackRepository()

    @staticmethod
    def _map_payload(design_map) -> Dict[str, Any]:
        return {"id": design_map.id, "crackId": design_map.crack_id, **Rect.of(design_map).as_dict()}

    def list_maps(self) -> List[Dict[str, Any]]:
        return [self._map_payload(m) for m in self.service.list(self.project_id)]

    def list_unmapped_cracks(self, block_id: Optional[int]) -> List[Dict[str, Any]]:
        qs = self.cracks.filtered(self.project_id, block_id=block_id, exclude_mapped=True)
        return [
            {"id": crack.id, "blockId": crack.block_id, "defectType": crack.defect_type}
            for crack in qs
        ]

    def create_map(self, crack_id: int, rect: Rect) -> Dict[str, Any]:
        try:
            return self._map_payload(self.service.create(self.project_id, crack_id, rect))
        except DesignMapException as e:
            raise GatewayError(str(e)) from e

    def update_map(self, map_id: int, crack_id: int) -> Dict[str, Any]:
        try:
            return self._map_payload(self.service.update(map_id, {}, crack_id=crack_id))
        except DesignMapException as e:
            raise GatewayError(str(e)) from e

    def delete_map(self, map_id: int) -> None:
        try:
            self.service.delete(map_id)
        except DesignMapException as e:
            raise GatewayError(str(e)) from e
