from eventforge.core.immutable import ImmutableEventDispatcher
from eventforge.core.traceable import TraceableEventDispatcher
from eventforge.validators import validate_dispatcher


class Mailer:
    def on_placed(self, event, event_name, dispatcher) -> None:
        pass


def test_valid_dispatcher_has_no_issues(container, container_dispatcher, listeners):
    container.set("mailer", Mailer())
    container_dispatcher.add_listener_service("order.placed", ("mailer", "on_placed"))
    container_dispatcher.add_listener("order.placed", listeners.build())

    assert validate_dispatcher(container_dispatcher) == []


def test_unknown_service_and_missing_method(container, container_dispatcher):
    container.set("mailer", Mailer())
    container_dispatcher.add_listener_service("order.placed", ("sms", "send"))
    container_dispatcher.add_listener_service("order.paid", ("mailer", "on_paid"))

    assert validate_dispatcher(container_dispatcher) == [
        "Event 'order.placed' references unknown service 'sms'.",
        "Service 'mailer' has no callable 'on_paid' for event 'order.paid'.",
    ]


def test_duplicate_registration_reported(dispatcher, listeners):
    listener = listeners.build("mailer")
    dispatcher.add_listener("order.placed", listener)
    dispatcher.add_listener("order.placed", listener, 5)
    dispatcher.add_listener("order.placed", listeners.build())

    assert validate_dispatcher(dispatcher) == [
        "Listener 'RecordingListener(mailer)' is registered 2 times for event 'order.placed'."
    ]


def test_wrappers_are_unwrapped(container, container_dispatcher):
    container_dispatcher.add_listener_service("order.placed", ("sms", "send"))
    wrapped = ImmutableEventDispatcher(TraceableEventDispatcher(container_dispatcher))

    assert validate_dispatcher(wrapped) == [
        "Event 'order.placed' references unknown service 'sms'."
    ]
