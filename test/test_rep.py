import pytest

from pyso3.so3 import rep
from pyso3.so3.rep import (
    CanonicalRep,
    EulerRep,
    MrpRep,
    QuaternionRep,
    RotationMatrixRep,
    RotationVectorRep,
)


def test_tags_are_not_instantiated():
    with pytest.raises(RuntimeError):
        QuaternionRep()
    with pytest.raises(RuntimeError):
        RotationMatrixRep()


def test_traits():
    t = rep.rep_traits(QuaternionRep)
    assert t.shape == (4, 1)
    assert t.params == 4
    assert not t.is_canonical
    assert t.canonical is RotationMatrixRep

    t = rep.rep_traits(RotationMatrixRep)
    assert t.shape == (3, 3)
    assert t.params == 9
    assert t.is_canonical

    for r in [RotationVectorRep, MrpRep, EulerRep]:
        assert rep.rep_traits(r).params == 3


def test_single_canonical():
    assert CanonicalRep is RotationMatrixRep
    assert [r for r in rep.all_reps() if rep.is_canonical(r)] == [CanonicalRep]
