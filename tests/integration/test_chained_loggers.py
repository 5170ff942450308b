import pytest

from logzen import Logger
from logzen.endpoints.errors import EndpointCycleError
from logzen.level import LogLevel

pytestmark = pytest.mark.integration


@pytest.fixture
def make_logger():
    def factory(**options):
        return Logger(attach_global_console=False, **options)

    return factory


def test_entry_forwarded_exactly_once(make_logger):
    sender = make_logger(format="A: $level $message")
    receiver = make_logger(format="B: $level $message")
    sender.attach(receiver)

    sender.send("x", LogLevel.LOG)

    assert sender.entries == ["A: LOG x"]
    assert receiver.entries == ["A: LOG x"]


def test_forwarding_respects_output_levels(make_logger):
    sender = make_logger()
    receiver = make_logger()
    sender.attach(receiver, [], [LogLevel.ERROR])

    sender.info("quiet")
    sender.error("loud")

    assert len(receiver.entries) == 1
    assert receiver.entries[0].endswith("[ERROR] loud")


def test_receiver_fans_out_to_its_own_endpoints(make_logger, writer):
    sender = make_logger()
    receiver = make_logger()
    receiver.attach(writer)
    sender.attach(receiver)

    sender.warn("chained")

    assert writer.writes == sender.entries


def test_endpoint_prefix_reformats_for_receiver(make_logger):
    sender = make_logger()
    receiver = make_logger(format="[$prefix$level] $message")
    sender.attach(receiver, prefix="UPSTREAM")

    sender.info("hello")

    assert receiver.entries == ["[UPSTREAM/INFO] hello"]


def test_inbound_entries_from_attached_logger(make_logger):
    listener = make_logger()
    speaker = make_logger(format="$message")
    listener.attach(speaker)

    speaker.info("from speaker")

    assert speaker.entries == ["from speaker"]
    assert listener.entries == ["from speaker"]


def test_inbound_input_levels_filter(make_logger):
    listener = make_logger()
    speaker = make_logger(format="$message")
    listener.attach(speaker, [LogLevel.ERROR], [])

    speaker.info("ignored")
    speaker.error("heard")

    assert listener.entries == ["heard"]


def test_mutual_input_attachment_does_not_echo(make_logger):
    first = make_logger(format="$message")
    second = make_logger(format="$message")
    first.attach(second, output_levels=[])
    second.attach(first, output_levels=[])

    first.log("once")

    assert first.entries == ["once"]
    assert second.entries == ["once"]


def test_three_logger_chain(make_logger):
    a, b, c = make_logger(), make_logger(), make_logger()
    a.attach(b)
    b.attach(c)

    a.log("deep")

    assert a.entries == b.entries == c.entries
    assert len(c.entries) == 1


def test_self_attachment_is_refused(make_logger):
    logger = make_logger()
    with pytest.raises(EndpointCycleError):
        logger.attach(logger)


def test_output_cycle_is_refused(make_logger):
    a, b, c = make_logger(), make_logger(), make_logger()
    a.attach(b)
    b.attach(c)

    with pytest.raises(EndpointCycleError):
        c.attach(a)
    assert c.attached_count == 0


def test_cycle_check_ignores_input_only_links(make_logger):
    a, b = make_logger(), make_logger()
    a.attach(b, output_levels=[])
    b.attach(a)

    assert a.attached_count == b.attached_count == 1


def test_detached_receiver_gets_nothing(make_logger):
    sender = make_logger()
    receiver = make_logger()
    sender.attach(receiver)
    sender.detach(receiver)

    sender.log("gone")
    receiver.log("local")

    assert len(receiver.entries) == 1
    assert sender.entries[0].endswith("gone")
    assert len(sender.entries) == 1
