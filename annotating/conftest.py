"""
Pytest fixtures shared by the annotating test suite.
"""

import pytest

from annotating.selection import LineSelection
from annotating.sequences import BinarySequence
from annotating.store import AnnotationStore
from annotating.targets import Target


@pytest.fixture
def qian():
    """Six HIGH lines."""
    return BinarySequence.parse("111111")


@pytest.fixture
def kun():
    """Six LOW lines."""
    return BinarySequence.parse("000000")


@pytest.fixture
def sample_store():
    """The single-channel sample store with two named Guas."""
    store = AnnotationStore(title="Sample Store")
    store.tags.append("Tag1")
    store.tags.append("Tag2")
    store.tags.append("Tag3")

    naming = store.add_group(title="Gua Name", comment="Names of the Guas")
    naming.add_entry("111", "Qian")
    naming.add_entry("000", "Kun")
    return store


@pytest.fixture
def full_store(qian, kun):
    """A store with every channel populated and all line targets in range."""
    store = AnnotationStore(title="Zhouyi", tags=["jing", "jing"])

    labels = store.add_string_group("Labels")
    labels.add_entry("qian", "The Creative")

    names = store.add_sequence_group("Names", "Names of the Guas")
    names.add_entry(qian, "Qian")
    names.add_entry(kun, "Kun")

    changing = store.add_selection_group("Changing lines")
    changing.add_entry(LineSelection.from_indices(qian, [0, 5]), "First and top")

    texts = store.add_target_group("Texts")
    texts.add_whole_entry(qian, "Qian: sublime success")
    for line in range(6):
        texts.add_line_entry(qian, line, f"Line {line + 1} of Qian")
    texts.add_untargeted_entry("About the whole book")
    texts.add_entry(Target.at_line(kun, 5), "Top six")
    return store
