import pytest

from network import FeatureCollection
from sketcher.geometry import Polyline
from sketcher.operations import EditSplitError, EditSplitOperation, ResultStatus


def _op_with(feature):
    return EditSplitOperation(FeatureCollection([feature]))


def test_split_at_inner_vertex():
    feature = Polyline([(0, 0), (1, 0), (2, 0), (3, 0)], id="f")
    data = _op_with(feature).execute(feature, (2, 0)).data

    assert data.committed == [(0, 0), (1, 0), (2, 0)]
    assert data.draft.coordinates == [(2, 0), (3, 0)]
    assert data.draft.properties["origin_id"] == "f"
    assert data.draft.properties["draft"] is True
    # Live-Geometrie ist sofort gekürzt
    assert feature.coordinates == [(0, 0), (1, 0), (2, 0)]
    assert data.original == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_split_at_last_vertex_has_no_draft():
    feature = Polyline([(0, 0), (1, 0), (2, 0)])
    data = _op_with(feature).execute(feature, (2, 0)).data

    assert data.draft is None
    assert feature.coordinates == [(0, 0), (1, 0), (2, 0)]


def test_split_at_first_vertex_keeps_single_vertex():
    feature = Polyline([(0, 0), (1, 0), (2, 0)])
    data = _op_with(feature).execute(feature, (0, 0)).data

    assert data.committed == [(0, 0)]
    assert data.draft.coordinates == [(0, 0), (1, 0), (2, 0)]


def test_non_vertex_click_raises():
    feature = Polyline([(0, 0), (2, 0)])
    with pytest.raises(EditSplitError):
        _op_with(feature).execute(feature, (1, 0))
    assert feature.coordinates == [(0, 0), (2, 0)]


def test_feature_outside_collection_raises():
    op = EditSplitOperation(FeatureCollection())
    with pytest.raises(EditSplitError):
        op.execute(Polyline([(0, 0), (2, 0)]), (0, 0))


def test_split_at_inserts_mid_segment_click():
    feature = Polyline([(0, -50), (0, 0), (0, 10)])
    op = _op_with(feature)
    op.split_at(feature, (0, 5))

    assert feature.coordinates == [(0, -50), (0, 0), (0, 5), (0, 10)]
    assert feature.has_vertex((0, 5))
    assert op.execute(feature, (0, 5)).data.committed == [(0, -50), (0, 0), (0, 5)]


def test_find_feature():
    feature = Polyline([(0, 0), (10, 0)])
    op = _op_with(feature)

    assert op.find_feature((5, 0)).data is feature
    assert op.find_feature((5, 1)).status == ResultStatus.NO_TARGET
