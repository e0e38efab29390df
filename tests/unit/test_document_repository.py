from document_manager.db.repositories import InMemoryDocumentRepository


def test_save_reports_insert_then_replace(make_document) -> None:
    repository = InMemoryDocumentRepository()
    document = make_document(document_id="doc-1")

    saved, replaced = repository.save(document)
    assert saved is document
    assert replaced is False

    updated = make_document(title="Updated Title", document_id="doc-1")
    saved, replaced = repository.save(updated)
    assert replaced is True
    assert repository.get_by_id("doc-1") == updated
    assert repository.count() == 1


def test_search_without_request_returns_all(make_document) -> None:
    repository = InMemoryDocumentRepository()
    repository.save(make_document(document_id="a"))
    repository.save(make_document(document_id="b"))

    assert [doc.id for doc in repository.search()] == ["a", "b"]
