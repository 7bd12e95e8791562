"""Tests for the main window: canvas input and drawing, matrix panel."""
import numpy as np
import pytest
from PySide6.QtCore import QPointF, Qt
from PySide6.QtTest import QTest

from eigenshow.app.ui.main_window import MainWindow
from eigenshow.config import DEFAULT_PRESET_INDEX, TITLE_PAIRED, TITLE_SINGLE
from eigenshow.model.matrices import MATRIX_PRESETS, RANDOM_CHOICE, format_matrix
from eigenshow.model.session import Mode


@pytest.fixture
def window(qt_app, session):
    win = MainWindow(session)
    win.show()
    qt_app.processEvents()
    yield win
    win.close()
    win.deleteLater()
    qt_app.processEvents()


def scene_point(canvas, x, y):
    return canvas.getPlotItem().vb.mapViewToScene(QPointF(x, y))


def title(canvas):
    return canvas.getPlotItem().titleLabel.text


def y_items(canvas):
    v = canvas.y_visuals
    return [v.trace, v.image_trace, v.arrow.shaft, v.arrow.head,
            v.image_arrow.shaft, v.image_arrow.head, v.label, v.image_label, v.markers]


class TestStartup:
    def test_single_mode_hides_y(self, window):
        assert window.store.session.mode is Mode.SINGLE
        assert TITLE_SINGLE in title(window.canvas)
        assert not any(item.isVisible() for item in y_items(window.canvas))
        assert window.canvas.x_visuals.arrow.head.isVisible()

    def test_default_matrix_shown(self, window):
        assert window.store.session.source.choice == DEFAULT_PRESET_INDEX
        assert window.panel.combo_box.currentIndex() == DEFAULT_PRESET_INDEX
        assert window.panel.matrix_label.text() == format_matrix(MATRIX_PRESETS[DEFAULT_PRESET_INDEX].to_array())

    @pytest.mark.parametrize("choice", [99, -3])
    def test_undefined_initial_choice_uses_default(self, qt_app, session, choice):
        win = MainWindow(session, initial_choice=choice)
        try:
            assert session.source.choice == DEFAULT_PRESET_INDEX
            np.testing.assert_array_equal(session.matrix, MATRIX_PRESETS[DEFAULT_PRESET_INDEX].to_array())
        finally:
            win.close()
            win.deleteLater()

    def test_initial_random_choice(self, qt_app, session):
        win = MainWindow(session, initial_choice=RANDOM_CHOICE)
        try:
            assert session.source.choice == RANDOM_CHOICE
            assert win.panel.matrix_label.text() == format_matrix(session.matrix)
        finally:
            win.close()
            win.deleteLater()


class TestCanvasInput:
    def test_pointer_move_updates_x_and_trace(self, window):
        canvas = window.canvas
        canvas.scene().sigMouseMoved.emit(scene_point(canvas, 0.0, 0.8))
        session = window.store.session
        np.testing.assert_allclose(session.x, [0.0, 1.0], atol=1e-6)
        assert len(session.x_trace) == 1
        assert len(session.y_trace) == 1
        assert len(canvas.x_visuals.trace.data) == 1

    def test_pointer_outside_disc_is_ignored(self, window):
        canvas = window.canvas
        canvas.scene().sigMouseMoved.emit(scene_point(canvas, 1.5, 0.2))
        np.testing.assert_array_equal(window.store.session.x, [1.0, 0.0])
        assert len(window.store.session.x_trace) == 0

    def test_left_click_marks_x_only(self, window):
        canvas = window.canvas
        scene_pos = scene_point(canvas, 0.0, 0.8)
        canvas.scene().sigMouseMoved.emit(scene_pos)
        QTest.mouseClick(canvas.viewport(), Qt.MouseButton.LeftButton,
                         Qt.KeyboardModifier.NoModifier, canvas.mapFromScene(scene_pos))
        session = window.store.session
        assert len(session.x_markers) == 1
        assert len(session.y_markers) == 0
        # source and image of the marker
        assert len(canvas.x_visuals.markers.data) == 2

    def test_right_click_marks_nothing(self, window):
        canvas = window.canvas
        scene_pos = scene_point(canvas, 0.0, 0.8)
        QTest.mouseClick(canvas.viewport(), Qt.MouseButton.RightButton,
                         Qt.KeyboardModifier.NoModifier, canvas.mapFromScene(scene_pos))
        assert len(window.store.session.x_markers) == 0


class TestMatrixPanel:
    def test_toggle_shows_y_and_clears(self, window):
        canvas = window.canvas
        canvas.scene().sigMouseMoved.emit(scene_point(canvas, 0.6, 0.6))
        window.panel.toggle.setChecked(True)
        session = window.store.session
        assert session.mode is Mode.PAIRED
        assert TITLE_PAIRED in title(canvas)
        assert all(item.isVisible() for item in y_items(canvas))
        assert len(session.x_trace) == 0
        assert len(canvas.x_visuals.trace.data) == 0

    def test_toggle_back_hides_y(self, window):
        window.panel.toggle.setChecked(True)
        window.panel.toggle.setChecked(False)
        assert TITLE_SINGLE in title(window.canvas)
        assert not any(item.isVisible() for item in y_items(window.canvas))

    def test_menu_selection_replaces_matrix(self, window):
        panel = window.panel
        canvas = window.canvas
        canvas.scene().sigMouseMoved.emit(scene_point(canvas, 0.0, 0.8))
        panel.combo_box.setCurrentIndex(0)
        panel.combo_box.activated.emit(0)
        session = window.store.session
        np.testing.assert_array_equal(session.matrix, MATRIX_PRESETS[0].to_array())
        assert panel.matrix_label.text() == format_matrix(session.matrix)
        assert len(session.x_trace) == 0
