from resgate.deprecation import DeprecationTracker, Feature


def make_tracker():
    logged = []
    return DeprecationTracker(logged.append), logged


def test_logs_once_per_service_and_feature():
    tracker, logged = make_tracker()
    assert tracker.report("test.model", Feature.MODEL_CHANGE_EVENT) is True
    assert tracker.report("test.other", Feature.MODEL_CHANGE_EVENT) is False
    assert len(logged) == 1


def test_message_names_service():
    tracker, logged = make_tracker()
    tracker.report("test.model", Feature.NEW_CALL_REQUEST)
    assert logged[0].startswith("Deprecation warning for service [test] - new call request v1.1 detected")


def test_separate_services_and_features_are_logged():
    tracker, logged = make_tracker()
    tracker.report("test.model", Feature.MODEL_CHANGE_EVENT)
    tracker.report("test.model", Feature.NEW_CALL_REQUEST)
    tracker.report("other.model", Feature.MODEL_CHANGE_EVENT)
    assert len(logged) == 3
    assert "model change event v1.0 detected" in logged[2]


def test_rid_without_dot_uses_whole_name():
    tracker, logged = make_tracker()
    tracker.report("test", Feature.MODEL_CHANGE_EVENT)
    assert "[test]" in logged[0]


def test_invalid_feature_is_reported_as_error():
    tracker, logged = make_tracker()
    combined = Feature.MODEL_CHANGE_EVENT | Feature.NEW_CALL_REQUEST
    assert tracker.report("test.model", combined) is False
    assert logged[0].startswith("Invalid deprecation feature type: ")
    assert tracker.report("test.model", Feature.MODEL_CHANGE_EVENT) is True