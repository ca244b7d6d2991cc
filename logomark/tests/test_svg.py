from __future__ import annotations

import re

from logomark.geometry import bezier_circle
from logomark.svg import DocumentBuilder, gradient_vector, url


def test_gradient_ids_are_namespaced_and_unique():
    doc = DocumentBuilder("starburst-abc12345-0")
    ids = [doc.add_linear_gradient("fill", [(0, "#000000"), (1, "#ffffff")]) for _ in range(3)]
    ids.append(doc.add_radial_gradient("fill", [(0, "#000000"), (1, "#ffffff")]))
    assert len(set(ids)) == 4
    assert all(i.startswith("starburst-abc12345-0-fill-") for i in ids)
    text = doc.tostring()
    declared = re.findall(r'id="([^"]+)"', text)
    assert sorted(declared) == sorted(ids)


def test_same_namespace_rebuilds_identically():
    def build() -> str:
        doc = DocumentBuilder("x-1")
        gid = doc.add_linear_gradient("g", [(0, "#123456"), (1, "#abcdef", 0.5)], angle=45)
        doc.add_path(bezier_circle(50, 50, 20), fill=url(gid))
        return doc.tostring()

    assert build() == build()


def test_document_has_fixed_viewbox_and_skips_empty_paths():
    doc = DocumentBuilder("ns")
    assert doc.add_path("") is False
    assert doc.add_path(bezier_circle(50, 50, 10), fill="#000000", opacity=2.0) is True
    assert doc.path_count == 1
    assert doc.command_count == 6
    text = doc.tostring()
    assert 'viewBox="0 0 100 100"' in text
    assert text.count("<path") == 1
    assert 'opacity="1"' in text


def test_namespace_is_slugged():
    doc = DocumentBuilder("9 weird/name")
    gid = doc.add_linear_gradient("a b", [(0, "#000000"), (1, "#ffffff")])
    assert re.fullmatch(r"[A-Za-z][A-Za-z0-9_-]*", gid)


def test_gradient_vector_spans_canvas():
    assert gradient_vector(0) == (0.0, 50.0, 100.0, 50.0)
    x1, y1, x2, y2 = gradient_vector(90)
    assert round(y1) == 0 and round(y2) == 100
