"""Unit tests for word routes."""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient
from api.main import app
from api.dependencies import get_word_repo
from adapter.fake.word_repository import FakeWordRepository
from domain.model.errors import StorageError
from domain.model.word import Word


class WordRouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeWordRepository()
        app.dependency_overrides[get_word_repo] = lambda: self.repo

    def tearDown(self):
        app.dependency_overrides.clear()


class TestCreateWord(WordRouteTestCase):

    def test_create_word(self):
        response = self.client.post("/words", json={
            "language": "german",
            "word": "Haus",
            "meaning": "House; Home",
            "example": "Mein Haus ist blau",
            "tags": ["noun"],
        })

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data['word'], 'Haus')
        self.assertEqual(data['score'], 0.0)
        self.assertEqual(data['tier'], 'Hard')
        self.assertTrue(self.repo.has_word('german', 'Haus'))

    def test_duplicate_returns_409(self):
        self.repo.add(Word.create('german', 'Haus', 'House'))

        response = self.client.post("/words", json={"language": "german", "word": "Haus", "meaning": "Home"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.repo.get('german', 'Haus').meaning, 'House')

    def test_blank_meaning_returns_400(self):
        response = self.client.post("/words", json={"language": "german", "word": "Haus", "meaning": "   "})
        self.assertEqual(response.status_code, 400)

    def test_missing_field_returns_422(self):
        response = self.client.post("/words", json={"language": "german", "word": "Haus"})
        self.assertEqual(response.status_code, 422)


class TestReplaceWord(WordRouteTestCase):

    def test_update(self):
        self.repo.add(Word.create('german', 'Haus', 'House'))

        response = self.client.put("/words/german/Haus", json={"meaning": "House; Home", "tags": ["noun"]})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['meaning'], 'House; Home')
        self.assertEqual(self.repo.get('german', 'Haus').tags, ['noun'])

    def test_update_missing_returns_404(self):
        response = self.client.put("/words/german/Haus", json={"meaning": "House"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.repo.store, {})


class TestListWords(WordRouteTestCase):

    def setUp(self):
        super().setUp()
        self.repo.add(Word.create('german', 'Er', 'He', tags=['pronoun']))
        self.repo.add(Word.create('german', 'Mann', 'Man; Husband', tags=['noun']))
        self.repo.add(Word.create('german', 'Frau', 'Woman; Wife', tags=['noun']))
        self.repo.add(Word.create('german', 'Stark', 'Strong', tags=['adjective']))

    def test_list_with_tags(self):
        response = self.client.get("/words", params={"language": "german", "tags": ["noun", "pronoun"]})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(sorted(w['word'] for w in response.json()), ['Er', 'Frau', 'Mann'])

    def test_list_without_tags(self):
        response = self.client.get("/words", params={"language": "german"})
        self.assertEqual(len(response.json()), 4)

    def test_storage_error_returns_503(self):
        repo = MagicMock()
        repo.find.side_effect = StorageError("down")
        app.dependency_overrides[get_word_repo] = lambda: repo

        response = self.client.get("/words", params={"language": "german"})

        self.assertEqual(response.status_code, 503)


class TestGetWord(WordRouteTestCase):

    def test_get(self):
        self.repo.add(Word.create('german', 'Haus', 'House', pronunciation='haus'))

        response = self.client.get("/words/german/Haus")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['pronunciation'], 'haus')
        self.assertEqual(response.json()['tier'], 'Hard')

    def test_get_missing_returns_404(self):
        response = self.client.get("/words/german/Haus")
        self.assertEqual(response.status_code, 404)


class TestImportWords(WordRouteTestCase):

    def test_import(self):
        self.repo.add(Word.create('german', 'Er', 'He'))

        response = self.client.post("/words/import", json=[
            {"language": "german", "word": "Er", "meaning": "Hello"},
            {"language": "german", "word": "Prost", "meaning": "Cheers"},
            {"language": "german", "word": "Leer", "meaning": " "},
        ])

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['imported'], 2)
        self.assertEqual([f['word'] for f in data['failed']], ['Leer'])
        self.assertEqual(self.repo.get('german', 'Er').meaning, 'Hello')

    def test_failures_keep_language(self):
        response = self.client.post("/words/import", json=[
            {"language": "german", "word": "Kind", "meaning": " "},
            {"language": "dutch", "word": "Kind", "meaning": " "},
        ])

        data = response.json()
        self.assertEqual(data['imported'], 0)
        self.assertEqual(
            [(f['language'], f['word']) for f in data['failed']],
            [('german', 'Kind'), ('dutch', 'Kind')],
        )


class TestConfiguredStore(unittest.TestCase):

    @patch.dict('os.environ', {'WORD_STORE': 'memory'})
    @patch('adapter.word_store.get_mongodb_client')
    def test_memory_store_selected_at_startup(self, mock_get_client):
        with TestClient(app) as client:
            created = client.post("/words", json={"language": "german", "word": "Haus", "meaning": "House"})
            fetched = client.get("/words/german/Haus")
            health = client.get("/health")

        self.assertEqual(created.status_code, 201)
        self.assertEqual(fetched.json()['meaning'], 'House')
        self.assertEqual(health.status_code, 200)
        self.assertEqual(health.json()['services']['word_store']['status'], 'healthy')
        mock_get_client.assert_not_called()

    @patch.dict('os.environ', {'WORD_STORE': 'mongodb'})
    @patch('adapter.word_store.get_mongodb_client', return_value=None)
    def test_unreachable_mongodb_returns_503(self, _):
        with TestClient(app) as client:
            response = client.post("/words", json={"language": "german", "word": "Haus", "meaning": "House"})

        self.assertEqual(response.status_code, 503)


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        app.state.word_repo = None

    def test_healthy(self):
        app.state.word_repo = FakeWordRepository()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')

    def test_ping_failure_is_degraded(self):
        repo = MagicMock()
        repo.ping.return_value = False
        app.state.word_repo = repo

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['services']['word_store']['status'], 'unhealthy')
        repo.ping.assert_called_once_with()

    def test_degraded_without_store(self):
        app.state.word_repo = None

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['status'], 'degraded')

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'running')


if __name__ == '__main__':
    unittest.main()
