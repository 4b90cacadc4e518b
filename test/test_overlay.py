from interaction import RecordingViewport, SketchKind, SketchOverlay, SketchStyle, fit_coordinates
from sketcher.geometry import Polyline


def test_draw_order_and_styles():
    overlay = SketchOverlay()
    changed = []
    overlay.changed.connect(lambda: changed.append(True))

    candidate = Polyline([(0, 0), (0, 10)], id="way", properties={"candidate": True})
    draft = Polyline([(0, 10), (5, 10)], id="f:draft", properties={"draft": True})
    draft_candidate = draft.copy(candidate=True)

    overlay.rebuild(
        sketch_line=[(0, 0), (0, 5)],
        candidate_lines=[candidate, draft_candidate],
        candidate_points=[(0, 0), (0, 10)],
        draft=draft,
        sketch_point=(0, 5),
    )

    kinds_styles = [(f.kind, f.style) for f in overlay.features]
    assert kinds_styles == [
        (SketchKind.LINE, SketchStyle.NORMAL),
        (SketchKind.LINE, SketchStyle.CANDIDATE),
        (SketchKind.POINT, SketchStyle.CANDIDATE),
        (SketchKind.POINT, SketchStyle.CANDIDATE),
        (SketchKind.LINE, SketchStyle.DRAFT),
        (SketchKind.POINT, SketchStyle.NORMAL),
    ]
    assert changed == [True]


def test_hidden_overlay_has_no_features():
    overlay = SketchOverlay()
    overlay.rebuild(sketch_point=(1, 1))
    overlay.visible = False
    assert overlay.features == []

    overlay.visible = True
    overlay.clear()
    assert overlay.features == []


def test_fit_needs_two_distinct_points():
    viewport = RecordingViewport()

    assert not fit_coordinates(viewport, [(1, 1), (1, 1)], 10)
    assert not fit_coordinates(None, [(0, 0), (1, 1)], 10)
    assert fit_coordinates(viewport, [(0, 0), (4, 2), (1, 1)], 10)
    assert viewport.fits == [((0, 0, 4, 2), 10)]
