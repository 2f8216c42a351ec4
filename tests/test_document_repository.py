"""Unit tests for FileDocumentRepository."""

import pytest

from app.domains.documents.errors import DocumentNotFound, InvalidDocumentName
from app.infrastructure.repositories.document_repository import FileDocumentRepository


class TestFileDocumentRepository:

    def test_list_returns_file_names(self, tmp_path):
        (tmp_path / "a.md").write_text("# a")
        (tmp_path / "b.txt").write_text("b")
        repo = FileDocumentRepository(tmp_path)
        assert set(repo.list()) == {"a.md", "b.txt"}

    def test_list_skips_directories_and_hidden_files(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / ".hidden").write_text("x")
        (tmp_path / "doc.txt").write_text("x")
        assert FileDocumentRepository(tmp_path).list() == ["doc.txt"]

    def test_list_missing_directory_is_empty(self, tmp_path):
        assert FileDocumentRepository(tmp_path / "nope").list() == []

    def test_write_then_read(self, tmp_path):
        repo = FileDocumentRepository(tmp_path / "data")
        repo.write("notes.txt", b"hello")
        assert repo.exists("notes.txt")
        assert repo.read("notes.txt") == b"hello"

    def test_write_overwrites_fully(self, tmp_path):
        repo = FileDocumentRepository(tmp_path)
        repo.write("notes.txt", b"a much longer first version")
        repo.write("notes.txt", b"short")
        assert repo.read("notes.txt") == b"short"

    def test_read_missing_raises(self, tmp_path):
        with pytest.raises(DocumentNotFound) as exc_info:
            FileDocumentRepository(tmp_path).read("missing.md")
        assert str(exc_info.value) == "missing.md does not exist!"

    def test_exists_false_for_directory(self, tmp_path):
        (tmp_path / "folder.md").mkdir()
        assert not FileDocumentRepository(tmp_path).exists("folder.md")

    def test_delete(self, tmp_path):
        repo = FileDocumentRepository(tmp_path)
        repo.write("gone.md", b"")
        repo.delete("gone.md")
        assert not repo.exists("gone.md")
        assert "gone.md" not in repo.list()

    def test_delete_missing_is_noop(self, tmp_path):
        FileDocumentRepository(tmp_path).delete("never-existed.txt")

    @pytest.mark.parametrize("name", ["../escape.txt", "a/b.md", "..", "."])
    def test_rejects_names_outside_directory(self, tmp_path, name):
        repo = FileDocumentRepository(tmp_path / "data")
        with pytest.raises(InvalidDocumentName):
            repo.write(name, b"x")
        assert not repo.exists(name)
