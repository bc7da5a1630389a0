import pytest

from whisker.system import InvalidStateError, System, SystemConfig, SystemState

WORLD = object()


class Recorder(System):
    def __init__(self):
        self.log = []

    def on_create(self, world):
        self.log.append("create")

    def on_configure(self, world, config):
        self.log.append("configure")

    def on_start(self, world):
        self.log.append("start")

    def on_update(self, world):
        self.log.append("update")

    def on_pause(self, world):
        self.log.append("pause")

    def on_stop(self, world):
        self.log.append("stop")

    def on_resume(self, world):
        self.log.append("resume")

    def on_destroy(self, world):
        self.log.append("destroy")


class Other(System):
    def on_update(self, world):
        pass


def test_new_system_is_uninit():
    system = Recorder()
    assert system.state is SystemState.UNINIT
    with pytest.raises(InvalidStateError):
        system.configure(WORLD, SystemConfig())
    assert system.state is SystemState.UNINIT
    assert system.log == []


def test_full_life_cycle_states():
    system = Recorder()
    system.create(WORLD)
    assert system.state is SystemState.INITED
    system.configure(WORLD, SystemConfig())
    assert system.state is SystemState.CONFIGURED
    system.start(WORLD)
    assert system.state is SystemState.ACTIVE
    system.update(WORLD)
    system.pause(WORLD)
    assert system.state is SystemState.PAUSED
    system.resume(WORLD)
    assert system.state is SystemState.ACTIVE
    system.pause(WORLD)
    system.stop(WORLD)
    assert system.state is SystemState.STOPPED
    assert system.log == [
        "create", "configure", "start", "update", "pause", "resume", "pause", "stop",
    ]


def test_start_without_configure_raises():
    system = Recorder()
    system.create(WORLD)
    with pytest.raises(InvalidStateError):
        system.start(WORLD)
    assert system.log == ["create"]
    system.configure(WORLD, SystemConfig())
    system.start(WORLD)
    assert system.state is SystemState.ACTIVE


def test_create_twice_raises():
    system = Recorder()
    system.create(WORLD)
    with pytest.raises(InvalidStateError):
        system.create(WORLD)
    system.configure(WORLD, SystemConfig())
    assert system.state is SystemState.CONFIGURED
    assert system.log == ["create", "configure"]


def test_update_when_paused_raises():
    system = Recorder()
    system.create(WORLD)
    system.configure(WORLD, SystemConfig())
    system.start(WORLD)
    system.pause(WORLD)
    with pytest.raises(InvalidStateError):
        system.update(WORLD)
    assert "update" not in system.log


def test_stop_active_raises():
    system = Recorder()
    system.create(WORLD)
    system.configure(WORLD, SystemConfig())
    system.start(WORLD)
    with pytest.raises(InvalidStateError):
        system.stop(WORLD)
    assert system.state is SystemState.ACTIVE


def test_destroy_active_pauses_and_stops_first():
    system = Recorder()
    system.create(WORLD)
    system.configure(WORLD, SystemConfig())
    system.start(WORLD)
    system.log.clear()
    system.destroy(WORLD)
    assert system.log == ["pause", "stop", "destroy"]
    assert system.state is SystemState.UNINIT


def test_destroy_configured_skips_pause_and_stop():
    system = Recorder()
    system.create(WORLD)
    system.configure(WORLD, SystemConfig())
    system.log.clear()
    system.destroy(WORLD)
    assert system.log == ["destroy"]
    assert system.state is SystemState.UNINIT


def test_default_name_is_class_name():
    config = SystemConfig()
    config.update_before(Recorder)
    assert config.before == {Recorder().name}
    assert Recorder().name == "Recorder"


def test_config_defaults():
    config = SystemConfig()
    assert (config.before, config.after, config.group, config.priority) == (set(), set(), "", 0)


def test_config_accepts_types_and_names():
    config = SystemConfig()
    config.update_before(Other, "named")
    config.update_after(Recorder)
    assert config.before == {Other.__qualname__, "named"}
    assert config.after == {Recorder.__qualname__}


def test_system_without_update_is_abstract():
    class Incomplete(System):
        pass

    with pytest.raises(TypeError):
        System()
    with pytest.raises(TypeError):
        Incomplete()