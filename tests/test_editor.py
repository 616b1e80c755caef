import pytest

from app_design_maps.editor import (
    ConfirmingDelete,
    CoordinateEditor,
    Drawing,
    Editing,
    GatewayError,
    Idle,
    InvalidTransition,
    PendingReview,
    ServiceGateway,
)
from app_design_maps.geometry import Point, Rect
from app_design_maps.models import DesignMap


class FakeGateway:
    def __init__(self):
        self.calls = []
        self.fail_with = None
        self.maps = []

    def _call(self, *args):
        self.calls.append(args)
        if self.fail_with:
            raise GatewayError(self.fail_with)

    def list_maps(self):
        return list(self.maps)

    def list_unmapped_cracks(self, block_id):
        return [{"id": 7, "blockId": block_id}]

    def create_map(self, crack_id, rect):
        self._call("create", crack_id, rect)
        self.maps.append({"id": len(self.maps) + 1, "crackId": crack_id})

    def update_map(self, map_id, crack_id):
        self._call("update", map_id, crack_id)

    def delete_map(self, map_id):
        self._call("delete", map_id)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def editor(gateway):
    return CoordinateEditor(gateway, scale=2.0, origin=Point(100, 50))


def draw(editor, start, end):
    editor.start_new_map()
    editor.pointer_down(start)
    editor.pointer_move(end)
    editor.pointer_up()


def test_drawing_uses_image_coordinates(editor):
    draw(editor, Point(300, 250), Point(140, 90))
    assert editor.state == PendingReview(rect=Rect(x=20, y=20, width=80, height=80))


def test_pointer_up_without_draft_returns_to_idle(editor):
    editor.start_new_map()
    editor.pointer_down(Point(0, 0))
    editor.pointer_up()
    assert editor.state == Idle()


def test_pointer_move_before_down_is_ignored(editor):
    editor.start_new_map()
    editor.pointer_move(Point(10, 10))
    assert editor.state == Drawing()


def test_confirm_new_map(editor, gateway):
    draw(editor, Point(100, 50), Point(120, 70))
    editor.select_block(3)
    assert editor.available_cracks() == [{"id": 7, "blockId": 3}]
    editor.select_crack(7)
    editor.confirm()

    assert editor.state == Idle()
    assert gateway.calls == [("create", 7, Rect(x=0, y=0, width=10, height=10))]
    assert editor.maps == [{"id": 1, "crackId": 7}]


def test_confirm_requires_crack(editor, gateway):
    draw(editor, Point(100, 50), Point(120, 70))
    editor.confirm()
    assert isinstance(editor.state, PendingReview)
    assert editor.state.error == "Select a crack"
    assert gateway.calls == []


def test_failed_confirm_keeps_state_with_error(editor, gateway):
    gateway.fail_with = "Design map already exists for crack"
    draw(editor, Point(100, 50), Point(120, 70))
    editor.select_crack(7)
    editor.confirm()
    assert isinstance(editor.state, PendingReview)
    assert editor.state.error == "Design map already exists for crack"


def test_select_block_clears_crack(editor):
    draw(editor, Point(100, 50), Point(120, 70))
    editor.select_crack(7)
    editor.select_block(2)
    assert editor.state.crack_id is None
    assert editor.state.block_id == 2


def test_edit_and_delete(editor, gateway):
    editor.open_edit(5, crack_id=1)
    editor.select_crack(9)
    editor.confirm()
    assert gateway.calls == [("update", 5, 9)]

    editor.open_edit(5, crack_id=9)
    editor.request_delete(5)
    assert editor.state == ConfirmingDelete(map_id=5)
    editor.confirm()
    assert gateway.calls[-1] == ("delete", 5)
    assert editor.state == Idle()


@pytest.mark.parametrize("exit_action", ["cancel", "escape"])
def test_cancel_from_any_state(editor, exit_action):
    for enter in (
        lambda: editor.start_new_map(),
        lambda: draw(editor, Point(100, 50), Point(120, 70)),
        lambda: editor.open_edit(1),
        lambda: editor.request_delete(1),
    ):
        enter()
        assert editor.state != Idle()
        if exit_action == "cancel":
            editor.cancel()
        else:
            editor.key_press("Escape")
        assert editor.state == Idle()


def test_other_keys_are_ignored(editor):
    editor.open_edit(1)
    editor.key_press("Enter")
    assert isinstance(editor.state, Editing)


def test_illegal_transitions(editor):
    with pytest.raises(InvalidTransition):
        editor.confirm()
    with pytest.raises(InvalidTransition):
        editor.pointer_down(Point(0, 0))

    editor.start_new_map()
    with pytest.raises(InvalidTransition):
        editor.start_new_map()
    with pytest.raises(InvalidTransition):
        editor.open_edit(1)
    with pytest.raises(InvalidTransition):
        editor.request_delete(1)


def test_viewport_scale_must_be_positive(editor):
    with pytest.raises(ValueError):
        editor.set_viewport(0, Point(0, 0))


@pytest.mark.django_db
def test_service_gateway_round_trip(project, other_project, make_crack):
    crack = make_crack(project)
    second = make_crack(project)
    foreign = make_crack(other_project)
    editor = CoordinateEditor(ServiceGateway(project.id))

    draw(editor, Point(0, 0), Point(40, 30))
    assert [item["id"] for item in editor.available_cracks()] == [crack.id, second.id]
    editor.select_crack(foreign.id)
    editor.confirm()
    assert editor.state.error == "Crack not found in project"

    editor.select_crack(crack.id)
    editor.confirm()
    assert editor.state == Idle()
    design_map = DesignMap.objects.get(crack=crack)
    assert (design_map.width, design_map.height) == (40, 30)
    assert editor.maps[0]["crackId"] == crack.id

    editor.open_edit(design_map.id, crack_id=crack.id)
    editor.select_crack(second.id)
    editor.confirm()
    design_map.refresh_from_db()
    assert design_map.crack_id == second.id

    editor.request_delete(design_map.id)
    editor.confirm()
    assert not DesignMap.objects.exists()
    assert editor.maps == []
