"""Corpus preparation tests."""

from __future__ import annotations

import numpy as np
import pytest

from weightrank.engine.corpus import build_corpus
from weightrank.engine.errors import EmptyCorpusError

from .conftest import make_document


def test_base_is_normalised_quality_and_seeds_scores(engine_config):
    documents = [
        make_document("a.html", [("b.html", 1.0)], quality=1.0),
        make_document("b.html", [("c.html", 1.0)], quality=2.0),
        make_document("c.html", [("a.html", 1.0)], quality=5.0),
    ]

    corpus = build_corpus(documents, engine_config)

    assert corpus.base.sum() == pytest.approx(1.0)
    assert corpus.base.tolist() == pytest.approx([0.125, 0.25, 0.625])
    assert [document.base for document in documents] == pytest.approx([0.125, 0.25, 0.625])
    assert [document.score for document in documents] == [document.base for document in documents]
    np.testing.assert_array_equal(corpus.scores, corpus.base)


def test_columns_sum_to_one_when_links_resolve(engine_config):
    documents = [
        make_document("a.html", [("b.html", 3.0), ("c.html", 1.0)]),
        make_document("b.html", [("a.html", 2.0), ("b.html", 2.0)]),
        make_document("c.html"),
    ]

    corpus = build_corpus(documents, engine_config)

    np.testing.assert_allclose(corpus.weights.sum(axis=0), np.ones(3))
    assert corpus.weights[1, 0] == pytest.approx(0.75)
    assert corpus.weights[2, 0] == pytest.approx(0.25)
    assert corpus.weights[1, 1] == pytest.approx(0.5)


def test_sink_column_is_the_preparation_time_score_snapshot(engine_config):
    documents = [
        make_document("a.html", [("c.html", 1.0)], quality=1.0),
        make_document("b.html", quality=2.0),
        make_document("c.html", quality=3.0),
    ]

    corpus = build_corpus(documents, engine_config)

    expected = np.array([1.0, 2.0, 3.0]) / 6.0
    np.testing.assert_allclose(corpus.weights[:, 1], expected)
    np.testing.assert_allclose(corpus.weights[:, 2], expected)

    corpus.commit_scores(np.array([0.9, 0.05, 0.05]))
    np.testing.assert_allclose(corpus.weights[:, 1], expected)


def test_links_outside_the_corpus_keep_their_share(engine_config):
    documents = [
        make_document("a.html", [("b.html", 1.0), ("http://example.com/", 1.0)]),
        make_document("b.html", [("A.HTML", 1.0)]),
    ]

    corpus = build_corpus(documents, engine_config)

    assert corpus.weights[1, 0] == pytest.approx(0.5)
    assert corpus.weights[:, 0].sum() == pytest.approx(0.5)
    assert corpus.weights[:, 1].sum() == 0.0


def test_zero_total_quality_falls_back_to_uniform_base(engine_config):
    documents = [make_document(name, quality=0.0) for name in ("a", "b", "c", "d")]

    corpus = build_corpus(documents, engine_config)

    np.testing.assert_allclose(corpus.base, np.full(4, 0.25))
    assert not np.isnan(corpus.weights).any()


def test_epsilon_scales_with_corpus_size(engine_config):
    documents = [make_document(f"{index}.html") for index in range(4)]

    assert build_corpus(documents, engine_config).epsilon == pytest.approx(0.0025)

    engine_config.raw["epsilon_scale"] = 0.1
    assert build_corpus(documents, engine_config).epsilon == pytest.approx(0.025)


def test_duplicate_names_resolve_to_first_document(engine_config):
    documents = [
        make_document("index.html", quality=1.0),
        make_document("index.html", quality=1.0),
        make_document("c.html", [("index.html", 1.0)], quality=1.0),
    ]

    corpus = build_corpus(documents, engine_config)

    assert corpus.index["index.html"] == 0
    assert corpus.weights[0, 2] == 1.0
    assert corpus.weights[1, 2] == 0.0


def test_empty_corpus_is_rejected(engine_config):
    with pytest.raises(EmptyCorpusError):
        build_corpus([], engine_config)
