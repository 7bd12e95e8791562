"""Tests for the event router, including end-to-end interaction scenarios."""
import numpy as np
import pytest

from eigenshow.app.events import (
    ButtonPressed, ButtonReleased, EventRouter, MatrixSelected, ModeToggled, MouseButton, PointerMoved,
)
from eigenshow.app.state import Store
from eigenshow.model.matrices import RANDOM_CHOICE
from eigenshow.model.session import Mode


@pytest.fixture
def store(session):
    return Store(session)


@pytest.fixture
def router(store):
    return EventRouter(store)


def lengths(store):
    return [len(b) for b in store.session.buffers()]


class TestDispatch:
    @pytest.mark.parametrize("event", [
        PointerMoved((0.2, 0.1)),
        PointerMoved((3.0, 3.0)),
        ButtonPressed(MouseButton.LEFT, (0.2, 0.1)),
        ButtonReleased(MouseButton.LEFT, (0.2, 0.1)),
        ButtonReleased(MouseButton.RIGHT, (0.2, 0.1)),
        MatrixSelected(1),
        MatrixSelected(None),
        ModeToggled(True),
    ])
    def test_never_consumes(self, router, event):
        assert router.dispatch(event) is False

    def test_press_does_nothing(self, router, store):
        router.dispatch(PointerMoved((0.0, 1.0)))
        router.dispatch(ButtonPressed(MouseButton.LEFT, (0.0, 1.0)))
        assert lengths(store) == [1, 1, 0, 0]

    def test_only_left_release_marks(self, router, store):
        router.dispatch(ButtonReleased(MouseButton.RIGHT, (0.0, 1.0)))
        router.dispatch(ButtonReleased(MouseButton.MIDDLE, (0.0, 1.0)))
        assert len(store.session.x_markers) == 0
        router.dispatch(ButtonReleased(MouseButton.LEFT, (0.0, 1.0)))
        assert len(store.session.x_markers) == 1

    def test_unknown_event(self, router):
        with pytest.raises(TypeError):
            router.dispatch("click")

    def test_random_reselection_redraws(self, router, store):
        router.dispatch(MatrixSelected(RANDOM_CHOICE))
        first = store.session.matrix
        router.dispatch(MatrixSelected(RANDOM_CHOICE))
        assert not np.array_equal(first, store.session.matrix)

    def test_preset_reselection_is_stable(self, router, store):
        router.dispatch(MatrixSelected(7))
        first = store.session.matrix
        router.dispatch(MatrixSelected(7))
        np.testing.assert_array_equal(first, store.session.matrix)

    def test_toggle_back_and_forth(self, router, store):
        modes = []
        store.mode_changed.connect(lambda s: modes.append((s.mode, s.y_visible, s.title)))
        router.dispatch(ModeToggled(True))
        router.dispatch(ModeToggled(False))
        assert [m[0] for m in modes] == [Mode.PAIRED, Mode.SINGLE]
        assert [m[1] for m in modes] == [True, False]
        assert modes[0][2] == "Make Ax perpendicular to Ay"
        assert modes[1][2] == "Make Ax parallel to x"


class TestScenarios:
    def test_drag_around_the_circle(self, router, store):
        router.dispatch(PointerMoved((1.0, 0.0)))
        np.testing.assert_allclose(store.session.x, [1.0, 0.0])
        np.testing.assert_allclose(store.session.y, [0.0, 1.0])

        router.dispatch(PointerMoved((0.0, 1.0)))
        np.testing.assert_allclose(store.session.x, [0.0, 1.0])
        np.testing.assert_allclose(store.session.y, [-1.0, 0.0])

        assert len(store.session.x_trace) == 2

    def test_identity_maps_x_onto_itself(self, router, store, identity_index):
        router.dispatch(MatrixSelected(identity_index))
        for p in [(0.9, 0.1), (-0.4, -0.4), (0.0, -1.3)]:
            router.dispatch(PointerMoved(p))
            assert np.array_equal(store.session.ax, store.session.x)

    def test_switch_to_svd_resets_everything(self, router, store):
        for angle in np.linspace(0.0, 1.0, 5):
            router.dispatch(PointerMoved((np.cos(angle), np.sin(angle))))
        router.dispatch(ButtonReleased(MouseButton.LEFT, (0.5, 0.8)))
        assert lengths(store) == [5, 5, 1, 0]

        router.dispatch(ModeToggled(True))
        assert lengths(store) == [0, 0, 0, 0]
        assert store.session.mode is Mode.PAIRED
        assert store.session.y_visible is True

    def test_click_outside_the_disc(self, router, store):
        router.dispatch(PointerMoved((0.3, 0.3)))
        router.dispatch(ButtonReleased(MouseButton.LEFT, (1.5, 0.0)))
        router.dispatch(ButtonReleased(MouseButton.LEFT, (-1.2, -1.2)))
        assert len(store.session.x_markers) == 0
        assert len(store.session.y_markers) == 0
