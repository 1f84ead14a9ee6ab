"""
Tests for loading STL files from disk.
"""

import numpy as np
import pytest

from stl_volume import calculate_mesh_volume, load_stl, load_stl_mesh
from stl_volume.core.data_classes import DiagnosticKind, Mesh, StlFormat
from stl_volume.testing import create_unit_cube, validate_mesh


class TestRoundTrip:
    """Binary and ASCII encodings of the same mesh load identically"""

    def test_single_triangle(self, stl_writer, single_facet):
        binary = load_stl(stl_writer.binary("tri.stl", single_facet))
        ascii_ = load_stl(stl_writer.ascii("tri_ascii.stl", single_facet))
        assert binary.format is StlFormat.BINARY
        assert ascii_.format is StlFormat.ASCII
        assert len(binary.mesh) == len(ascii_.mesh) == 1
        np.testing.assert_allclose(binary.mesh.vertex_array(), ascii_.mesh.vertex_array())

    def test_cube(self, stl_writer):
        cube = create_unit_cube()
        binary = load_stl_mesh(stl_writer.binary("cube.stl", cube))
        ascii_ = load_stl_mesh(stl_writer.ascii("cube_ascii.stl", cube, name="cube"))
        np.testing.assert_allclose(binary.to_array(), ascii_.to_array(), atol=1e-6)
        assert calculate_mesh_volume(binary) == pytest.approx(1.0)
        assert calculate_mesh_volume(ascii_) == pytest.approx(1.0)
        assert ascii_.comment == "cube"
        valid, message = validate_mesh(binary)
        assert valid, message


class TestFormatDispatch:
    """Detection drives the choice of decoder"""

    def test_binary_named_solid(self, stl_writer):
        cube = create_unit_cube()
        result = load_stl(stl_writer.binary("misnamed.stl", cube, comment=b"solid misnamed"))
        assert result.format is StlFormat.BINARY
        assert len(result.mesh) == 12
        assert result.mesh.comment.startswith("solid misnamed")
        assert result.diagnostics == []

    def test_tiny_ascii_file_is_empty(self, stl_writer):
        """Files shorter than a binary header load nothing"""
        result = load_stl(stl_writer.ascii("tiny.stl", text="solid t\nendsolid t\n"))
        assert result.format is StlFormat.BINARY
        assert len(result.mesh) == 0
        assert result.diagnostics == []

    def test_path_as_string(self, stl_writer, single_facet):
        path = stl_writer.binary("tri.stl", single_facet)
        assert len(load_stl(str(path)).mesh) == 1


class TestFailSoft:
    """Unreadable files and bad content never raise"""

    def test_missing_file(self, tmp_path):
        result = load_stl(tmp_path / "does_not_exist.stl")
        assert len(result.mesh) == 0
        assert result.format is None
        assert [d.kind for d in result.diagnostics] == [DiagnosticKind.UNREADABLE_FILE]

    def test_directory(self, tmp_path):
        result = load_stl(tmp_path)
        assert len(result.mesh) == 0
        assert result.diagnostics_of(DiagnosticKind.UNREADABLE_FILE)

    def test_sanity_rejection(self, stl_writer):
        cube = create_unit_cube()
        nan_facet = cube[0].copy()
        nan_facet[2, 1] = np.nan
        huge_facet = cube[1].copy()
        huge_facet[3, 0] = 2.0e7
        facets = np.concatenate([cube[:4], nan_facet[None], cube[4:8], huge_facet[None], cube[8:]])

        result = load_stl(stl_writer.binary("dirty.stl", facets))
        assert len(result.mesh) == 12
        np.testing.assert_allclose(result.mesh.to_array(), cube, atol=1e-6)
        kinds = [d.kind for d in result.diagnostics]
        assert kinds == [DiagnosticKind.NAN_VERTEX, DiagnosticKind.HUGE_VERTEX]

    def test_diagnostics_name_the_file(self, stl_writer, caplog):
        text = ("solid noisy\n"
                "facet normal 0 0 1 outer loop vertex 0 0 0 vertex 1 0 0 vertex 0 1 0 "
                "endloop endfacet\nmystery\n" + " " * 100 + "\nendsolid\n")
        path = stl_writer.ascii("noisy.stl", text=text)
        with caplog.at_level("WARNING", logger="stl_volume"):
            result = load_stl(path)
        assert len(result.mesh) == 1
        assert result.diagnostics[0].source == str(path)
        assert f"{path}: unknown 'mystery'" in caplog.text


class TestAppend:
    """Several files can be accumulated into one mesh"""

    def test_load_into_existing_mesh(self, stl_writer):
        cube = create_unit_cube()
        mesh = Mesh()
        load_stl(stl_writer.binary("a.stl", cube[:6]), mesh=mesh)
        result = load_stl(stl_writer.ascii("b.stl", cube[6:], name="second"), mesh=mesh)
        assert result.mesh is mesh
        assert len(mesh) == 12
        assert mesh.comment == "second"
        assert calculate_mesh_volume(mesh) == pytest.approx(1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
