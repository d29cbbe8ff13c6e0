# File: tests/test_structure_model.py
"""
Test StructureModel: memoization, invalidation and the boolean evaluate().
"""

import dataclasses
import math
import threading

import pytest

from tetra_pair import (
    StructureModel,
    GeometryInconsistencyError,
    InvalidInputError,
    get_default_input_parameters,
)


def test_defaults_on_construction():
    model = StructureModel()

    assert model.get_input_parameters() == get_default_input_parameters()
    assert StructureModel.get_default_input_parameters() == get_default_input_parameters()
    assert model.evaluation_count == 0
    assert model.is_stale


def test_repeated_reads_hit_the_cache():
    model = StructureModel()

    first = model.get_output_parameters()
    second = model.get_output_parameters()

    assert first is second
    assert model.evaluation_count == 1
    assert not model.is_stale


def test_equal_input_does_not_recompute():
    model = StructureModel()
    model.get_output_parameters()

    model.set_input_parameters(get_default_input_parameters())
    model.get_output_parameters()

    assert model.evaluation_count == 1


def test_changed_input_recomputes_once():
    model = StructureModel()
    before = model.get_output_parameters()

    params = dataclasses.replace(get_default_input_parameters(), square_side_length=18.0)
    model.set_input_parameters(params)
    assert model.is_stale

    after = model.get_output_parameters()
    again = model.get_output_parameters()

    assert model.evaluation_count == 2
    assert after is again
    assert after.frame.total_length > before.frame.total_length


def test_invalidate_forces_recompute():
    model = StructureModel()
    first = model.get_output_parameters()

    model.invalidate()
    second = model.get_output_parameters()

    assert model.evaluation_count == 2
    assert first == second
    assert first is not second


def test_evaluate_success_returns_false():
    model = StructureModel()

    assert model.evaluate() is False
    assert model.last_error is None
    assert model.evaluation_count == 1


def test_evaluate_geometry_failure_returns_true():
    params = dataclasses.replace(get_default_input_parameters(), angle_ABC=math.radians(175.0))
    model = StructureModel(params)

    assert model.evaluate() is True
    assert isinstance(model.last_error, GeometryInconsistencyError)
    assert model.is_stale

    with pytest.raises(GeometryInconsistencyError):
        model.get_output_parameters()


def test_evaluate_invalid_input_returns_true():
    params = dataclasses.replace(get_default_input_parameters(), square_side_length=-1.0)
    model = StructureModel(params)

    assert model.evaluate() is True
    assert isinstance(model.last_error, InvalidInputError)


def test_failure_clears_previous_output():
    model = StructureModel()
    model.evaluate()

    model.set_input_parameters(
        dataclasses.replace(get_default_input_parameters(), angle_ABC=math.radians(175.0)))
    assert model.evaluate() is True

    # Back to a good input: recomputed, error cleared
    model.set_input_parameters(get_default_input_parameters())
    assert model.evaluate() is False
    assert model.last_error is None


def test_concurrent_reads_evaluate_once():
    model = StructureModel()
    results = []

    def read():
        results.append(model.get_output_parameters())

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert model.evaluation_count == 1
    assert all(r is results[0] for r in results)
