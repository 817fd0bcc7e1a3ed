"""Integration tests for Doclet Processor."""

import xml.etree.ElementTree as ET
import zipfile

import pytest

from doclet_archive.doclet_processor.config import ArchiverConfig
from doclet_archive.doclet_processor.processor import DocletProcessor

SAMPLE = "samples/widget-library.yaml"


@pytest.fixture
def processor(tmp_path):
    config = ArchiverConfig(
        library_name="widgets",
        library_version="2.0",
        project_url="https://example.com/widgets",
        output_path=tmp_path,
        log_progress=False,
    )
    return DocletProcessor(config)


def read_record(archive_path, name):
    with zipfile.ZipFile(archive_path) as archive:
        return ET.fromstring(archive.read(name))


class TestDocletProcessor:
    """End-to-end test cases for DocletProcessor."""

    def test_archive_layout(self, processor, tmp_path):
        """Test every type and the manifest end up in the archive."""
        output = processor.process_file(SAMPLE)

        assert output == tmp_path / "widgets-2.0.zip"
        with zipfile.ZipFile(output) as archive:
            assert sorted(archive.namelist()) == [
                "info.xml",
                "lib/Marker.xml",
                "lib/Outer.Inner.xml",
                "lib/Renderable.xml",
                "lib/Widget.xml",
            ]

    def test_widget_record(self, processor):
        """Test the record of the deprecated widget class."""
        widget = read_record(processor.process_file(SAMPLE), "lib/Widget.xml")

        assert widget.get("name") == "lib|Widget"
        assert widget.get("modifiers") == "class public"
        assert widget.get("extends") == "java.lang|Object"
        assert widget.get("implements") == "lib|Renderable"
        assert widget.get("deprecated") == "true"
        assert widget.get("since") == "2.0"
        assert widget.find("description").text == (
            "A **visual** component. Use `Widget<T>` for generic widgets."
        )

        constructor = widget.find("constructor")
        assert constructor.find("parameter").get("type") == "java.lang|String"

        render, resize = widget.findall("method")
        assert "returns" not in render.attrib
        assert render.get("overrides") == "lib|Renderable#render()"
        assert render.find("description").text == "Draws the widget."
        assert resize.get("returns") == "boolean"
        assert resize.get("throws") == "java.io|IOException"
        assert resize.get("since") == "2.1"
        assert resize.find("parameter").get("type") == "int[]"

    def test_nested_record(self, processor):
        """Test the nested type's record and its model-reported override."""
        inner = read_record(processor.process_file(SAMPLE), "lib/Outer.Inner.xml")

        assert inner.get("name") == "lib|Outer.Inner"
        assert inner.get("modifiers") == "class public static"
        assert inner.get("extends") == "lib|Widget"
        assert inner.find("method").get("overrides") == "lib|Widget#render()"

    def test_interface_and_annotation_records(self, processor):
        """Test interface and annotation modifiers."""
        output = processor.process_file(SAMPLE)
        renderable = read_record(output, "lib/Renderable.xml")
        marker = read_record(output, "lib/Marker.xml")

        assert renderable.get("modifiers") == "public abstract interface"
        assert renderable.find("description").text == "Something that can be drawn on a canvas."
        assert marker.get("modifiers") == "annotation public abstract"

    def test_manifest(self, processor):
        """Test the manifest record."""
        info = read_record(processor.process_file(SAMPLE), "info.xml")

        assert info.get("name") == "widgets"
        assert info.get("version") == "2.0"
        assert info.get("projectUrl") == "https://example.com/widgets"
        assert "baseUrl" not in info.attrib
        assert "generated" in info.attrib

    def test_unloadable_model(self, processor):
        """Test a missing model dump raises a ValueError."""
        with pytest.raises(ValueError, match="File not found"):
            processor.process_file("samples/missing.yaml")
