import pytest

from hexapod.model import HexapodModel
from hexapod.models import JointAngles, Point, Pose

from conftest import STANDING_ENDPOINTS


def test_initial_state(parameters):
    model = HexapodModel(parameters)

    assert model.pose == Pose(z=0.17)
    assert model.endpoints == [Point(1.0, 0.0, 0.0)] * 6
    assert model.joint_angles == [JointAngles()] * 6
    assert model.selected_legs == []
    assert model.category == 'body'


def test_model_follows_committed_state(body, model):
    body.update_body_ik(Pose(z=0.25, yaw=0.1), STANDING_ENDPOINTS)

    assert model.pose == body.pose
    assert model.endpoints == body.endpoints
    assert model.joint_angles == body.joint_angles


def test_model_ignores_rejected_updates(standing_body, model):
    before = (model.pose, model.endpoints, model.joint_angles)

    standing_body.update_body_ik(Pose(z=0.02), STANDING_ENDPOINTS)

    assert (model.pose, model.endpoints, model.joint_angles) == before


def test_readers_get_copies(model):
    model.pose.z = 10.0
    model.endpoints[0].x = 10.0
    model.joint_angles[0].alpha = 10.0

    assert model.pose.z == 0.17
    assert model.endpoints[0].x == 1.0
    assert model.joint_angles[0].alpha == 0.0


def test_unbind_stops_following(body, model):
    model.unbind()

    body.update_body_ik(Pose(z=0.3), STANDING_ENDPOINTS)

    assert model.pose == Pose(z=0.17)


def test_select_legs_sorts_and_deduplicates(model):
    model.select_legs([4, 1, 4])

    assert model.selected_legs == [1, 4]


@pytest.mark.parametrize('indexes', [[6], [-1], [0, 9]])
def test_select_legs_out_of_range(model, indexes):
    with pytest.raises(ValueError):
        model.select_legs(indexes)


def test_category(model):
    model.category = 'joints'
    assert model.category == 'joints'

    with pytest.raises(ValueError):
        model.category = 'sliders'
