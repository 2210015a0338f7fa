import json

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from bayesdict.io.data import iter_documents


def test_iter_txt_skips_blank_lines(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("first doc\n\nsecond doc\n", encoding="utf-8")
    assert list(iter_documents(path)) == ["first doc", "second doc"]


def test_iter_jsonl_uses_text_key(tmp_path):
    path = tmp_path / "corpus.jsonl"
    records = [{"body": "alpha beta"}, {"other": 1}]
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
    docs = list(iter_documents(path, fmt="jsonl", text_key="body"))
    assert docs == ["alpha beta", '{"other": 1}']


def test_iter_parquet(tmp_path):
    path = tmp_path / "corpus.parquet"
    pq.write_table(pa.table({"text": ["alpha", None, "gamma"]}), path)
    assert list(iter_documents(path, fmt="parquet")) == ["alpha", "gamma"]


def test_max_samples(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("a\nb\nc\n", encoding="utf-8")
    assert list(iter_documents(path, max_samples=2)) == ["a", "b"]


def test_unknown_format(tmp_path):
    with pytest.raises(ValueError, match="Unknown format"):
        list(iter_documents(tmp_path / "x", fmt="xml"))
