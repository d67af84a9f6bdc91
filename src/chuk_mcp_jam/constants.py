"""
Constants and enums for the jam session.

No magic strings - use enums for constrained values.
"""

from enum import Enum, IntEnum


class TrackKind(str, Enum):
    """The independently switchable tracks of a generated song."""

    MELODY = "melody"
    CHORDS = "chords"
    PERCUSSION = "percussion"


class PercussionFlavor(IntEnum):
    """Percussion flavour indices as exposed to callers."""

    ROCK = 0
    FUNK = 1
    SHUFFLE = 2


class GMDrumNote(IntEnum):
    """General MIDI drum note numbers, named the way notation refers to them."""

    ACOUSTIC_BASS_DRUM = 35
    BASS_DRUM = 36
    SIDE_STICK = 37
    ACOUSTIC_SNARE = 38
    HAND_CLAP = 39
    ELECTRIC_SNARE = 40
    LOW_FLOOR_TOM = 41
    CLOSED_HI_HAT = 42
    HIGH_FLOOR_TOM = 43
    PEDAL_HI_HAT = 44
    LOW_TOM = 45
    OPEN_HI_HAT = 46
    LOW_MID_TOM = 47
    HI_MID_TOM = 48
    CRASH_CYMBAL_1 = 49
    HIGH_TOM = 50
    RIDE_CYMBAL_1 = 51
    TAMBOURINE = 54
    COWBELL = 56


# Voice (MIDI channel) assignments used by generated skeletons
MELODY_VOICE = 0
CHORDS_VOICE = 1
PERCUSSION_VOICE = 9  # GM drums

# Session defaults
DEFAULT_KEY = 0  # C
DEFAULT_INSTRUMENT = 0  # Acoustic grand piano
DEFAULT_PERCUSSION = PercussionFlavor.ROCK

# Export file naming
MIDI_SUFFIX = ".mid"
EXPORT_BASE_NAME = "jam"
PLAYBACK_BASE_NAME = "tempjam"


class ErrorMessages:
    """Standardized error messages."""

    NO_SONG = "No song generated. Call generate first."
    INVALID_KEY = "Invalid key: {key}. Must be between 0 and 11."
    INVALID_INSTRUMENT = "Invalid instrument: {instrument}. Must be between 0 and 127."
    SAVE_FAILED = "Save unsuccessful: {error}"
    LOAD_FAILED = "Failed playback: {error}"


class SuccessMessages:
    """Standardized success messages."""

    SONG_GENERATED = "Generated song in key {key} at {tempo}."
    SONG_EXPORTED = "Exported song to {path}."
    PLAYBACK_STARTED = "Playing {path}."
    PLAYBACK_STOPPED = "Playback stopped."
    TEMPO_UNCHANGED = "No tempo marking for {bpm} BPM; keeping {tempo}."
