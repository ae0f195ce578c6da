"""Tests for tracked property descriptors."""

import dataclasses

import pytest

from statekeep.configuration.descriptors import MISSING, create_descriptor
from statekeep.errors import BindingError


class Player:
    volume = 50

    def __init__(self):
        self.track = "intro"
        self._muted = False

    @property
    def muted(self):
        return self._muted

    @muted.setter
    def muted(self, value):
        self._muted = value

    @property
    def duration(self):
        return 120

    def play(self):
        pass

    @classmethod
    def create(cls):
        return cls()


class TestCreateDescriptor:
    """Test resolving attribute names into accessors."""

    def setup_method(self):
        self.player = Player()

    def test_instance_attribute(self):
        descriptor = create_descriptor(self.player, "track")

        assert descriptor.name == "track"
        assert descriptor.getter(self.player) == "intro"
        descriptor.setter(self.player, "outro")
        assert self.player.track == "outro"

    def test_property_with_setter(self):
        descriptor = create_descriptor(self.player, "muted")

        descriptor.setter(self.player, True)
        assert descriptor.getter(self.player) is True

    def test_class_attribute_writes_to_instance(self):
        descriptor = create_descriptor(self.player, "volume")

        descriptor.setter(self.player, 80)

        assert self.player.volume == 80
        assert Player.volume == 50

    def test_default_metadata(self):
        with_default = create_descriptor(self.player, "track", None)
        without_default = create_descriptor(self.player, "track")

        assert with_default.is_default_specified is True
        assert with_default.default_value is None
        assert without_default.is_default_specified is False

    @pytest.mark.parametrize("name", ["missing", "duration", "play", "create"])
    def test_untrackable_names(self, name):
        with pytest.raises(BindingError) as exc_info:
            create_descriptor(self.player, name)

        assert exc_info.value.member_name == name
        assert exc_info.value.target_type == "Player"

    def test_descriptor_is_immutable(self):
        descriptor = create_descriptor(self.player, "track")

        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.name = "other"


class TestMissing:
    def test_sentinel(self):
        assert repr(MISSING) == "MISSING"
        assert not MISSING
        assert type(MISSING)() is MISSING
