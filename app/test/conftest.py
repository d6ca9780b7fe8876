import asyncio, copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument, TEXT
from pymongo.errors import DuplicateKeyError

from app.config.settings import Settings
from app.database.connection import COLLECTION_INDEXES, MongoConnection, get_connection
from main import app


# ****************************************************
#  In-memory stand-in for the async driver
# ****************************************************

def get_path(document, path):
    value = document
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def text_of(value) -> str:
    if isinstance(value, list):
        return " ".join(text_of(item) for item in value)
    return "" if value is None else str(value)


def text_score(document, text_fields, search) -> int:
    haystack = " ".join(text_of(get_path(document, f)) for f in text_fields).lower()
    return sum(haystack.count(term) for term in search.lower().split())


def matches(document, query, text_fields) -> bool:
    for key, condition in query.items():
        if key == "$text":
            if text_score(document, text_fields, condition["$search"]) == 0:
                return False
            continue

        value = get_path(document, key)
        if isinstance(condition, dict) and condition and all(op.startswith("$") for op in condition):
            for op, arg in condition.items():
                if op == "$in":
                    values = value if isinstance(value, list) else [value]
                    if not any(v in arg for v in values):
                        return False
                elif op == "$gte":
                    if value is None or value < arg:
                        return False
                elif op == "$lte":
                    if value is None or value > arg:
                        return False
                else:
                    raise NotImplementedError(op)
        elif isinstance(value, list) and not isinstance(condition, list):
            if condition not in value:
                return False
        elif value != condition:
            return False
    return True


def apply_update(document, update):
    for key, value in update.get("$set", {}).items():
        document[key] = copy.deepcopy(value)
    for key, amount in update.get("$inc", {}).items():
        document[key] = document.get(key, 0) + amount


class FakeCursor:
    def __init__(self, collection, query):
        self.collection = collection
        self.query = query
        self.sort_keys = []
        self.skip_count = 0
        self.limit_count = 0

    def sort(self, keys):
        self.sort_keys = list(keys)
        return self

    def skip(self, count):
        if count < 0:
            raise ValueError("skip must be >= 0")
        self.skip_count = count
        return self

    def limit(self, count):
        self.limit_count = count
        return self

    async def to_list(self, length=None):
        await asyncio.sleep(0)
        self.collection.raise_if_failing()
        documents = [copy.deepcopy(d) for d in self.collection.documents if matches(d, self.query, self.collection.text_fields)]

        search = self.query.get("$text", {}).get("$search", "")
        for field, direction in reversed(self.sort_keys):
            if isinstance(direction, dict):
                documents.sort(key=lambda d: text_score(d, self.collection.text_fields, search), reverse=True)
            else:
                documents.sort(key=lambda d: (get_path(d, field) is None, get_path(d, field)), reverse=direction == -1)

        documents = documents[self.skip_count:]
        if self.limit_count:
            documents = documents[:abs(self.limit_count)]
        return documents


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.documents = []
        self.indexes = []
        self.failure = None
        self.count_calls = 0
        self.text_fields = []
        self.unique_fields = []
        for keys, options in COLLECTION_INDEXES.get(name, []):
            self.text_fields.extend(field for field, kind in keys if kind == TEXT)
            if options.get("unique"):
                self.unique_fields.extend(field for field, _ in keys)

    def raise_if_failing(self):
        if self.failure is not None:
            raise self.failure

    def check_unique(self, document, ignore=None):
        for field in self.unique_fields:
            for existing in self.documents:
                if existing is not ignore and existing.get(field) == document.get(field):
                    raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} index: {field}_1", code=11000)

    def find_matching(self, query):
        return next((d for d in self.documents if matches(d, query, self.text_fields)), None)

    def find(self, query=None):
        return FakeCursor(self, query or {})

    async def count_documents(self, query):
        await asyncio.sleep(0)
        self.raise_if_failing()
        self.count_calls += 1
        return sum(1 for d in self.documents if matches(d, query, self.text_fields))

    async def insert_one(self, document):
        await asyncio.sleep(0)
        self.raise_if_failing()
        self.check_unique(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def insert_many(self, documents):
        ids = [(await self.insert_one(document)).inserted_id for document in documents]
        return SimpleNamespace(inserted_ids=ids)

    async def find_one(self, query):
        await asyncio.sleep(0)
        self.raise_if_failing()
        document = self.find_matching(query)
        return copy.deepcopy(document) if document is not None else None

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        await asyncio.sleep(0)
        self.raise_if_failing()
        document = self.find_matching(query)
        if document is None:
            return None
        before = copy.deepcopy(document)
        after = copy.deepcopy(document)
        apply_update(after, update)
        self.check_unique(after, ignore=document)
        document.clear()
        document.update(after)
        return copy.deepcopy(after if return_document == ReturnDocument.AFTER else before)

    async def find_one_and_delete(self, query):
        await asyncio.sleep(0)
        self.raise_if_failing()
        document = self.find_matching(query)
        if document is not None:
            self.documents.remove(document)
        return document

    async def delete_many(self, query):
        kept = [d for d in self.documents if not matches(d, query, self.text_fields)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)

    async def create_index(self, keys, **options):
        self.indexes.append((keys, options))
        return "_".join(str(field) for field, _ in keys)

    # test helper: store documents as they would sit in the database
    def seed(self, *documents):
        stored = []
        for document in documents:
            document = {"_id": ObjectId(), **copy.deepcopy(document)}
            self.documents.append(document)
            stored.append(document)
        return stored


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name):
        return {"ok": 1}


class FakeAdmin:
    def __init__(self, failure=None):
        self.failure = failure
        self.calls = 0

    async def command(self, name):
        self.calls += 1
        await asyncio.sleep(0)
        if self.failure is not None:
            raise self.failure
        return {"ok": 1}


class FakeMongoClient:
    created = []
    ping_failure = None

    def __init__(self, uri, **options):
        self.uri = uri
        self.options = options
        self.databases = {}
        self.admin = FakeAdmin(FakeMongoClient.ping_failure)
        self.closed = False
        FakeMongoClient.created.append(self)

    def __getitem__(self, name):
        if name not in self.databases:
            self.databases[name] = FakeDatabase()
        return self.databases[name]

    async def close(self):
        self.closed = True


# ****************************************************
#  Fixtures
# ****************************************************

@pytest.fixture
def fake_client_class():
    FakeMongoClient.created = []
    FakeMongoClient.ping_failure = None
    yield FakeMongoClient
    FakeMongoClient.created = []
    FakeMongoClient.ping_failure = None


@pytest.fixture
def test_settings():
    return Settings(MONGODB_URI="mongodb://fake-host:27017", MONGODB_DB="catalog-test", LOG_FILE=None)


@pytest.fixture
def mongo(test_settings, fake_client_class):
    return MongoConnection(test_settings, client_factory=fake_client_class)


@pytest.fixture
def db(mongo):
    return asyncio.run(mongo.get_database())


@pytest.fixture
def client(mongo, db):
    app.dependency_overrides[get_connection] = lambda: mongo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def destination_payload():
    def build(**overrides):
        payload = {
            "name": "Bali",
            "country": "Indonesia",
            "region": "Asia",
            "description": "Tropical paradise with beaches and temples.",
            "images": ["https://images.example.com/bali.jpg"],
            "highlights": [" Beaches ", "Temples"],
            "bestTimeToVisit": "April to October",
            "startingPrice": 899,
            "tags": [" Beach ", "Culture"],
            "coordinates": {"lat": -8.34, "lng": 115.09},
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def package_payload():
    def build(**overrides):
        payload = {
            "title": "Magical Bali Adventure",
            "destination": "Bali",
            "duration": "7 Days / 6 Nights",
            "price": 899,
            "description": "Cultural tours, beach activities and temple visits.",
            "images": ["https://images.example.com/bali-package.jpg"],
            "itinerary": [
                {
                    "day": 1,
                    "title": "Arrival",
                    "description": "Airport pickup and hotel check-in",
                    "activities": ["Airport transfer"],
                    "meals": ["Dinner"],
                }
            ],
            "difficulty": "Easy",
            "groupSize": {"min": 2, "max": 15},
            "departureDate": "2025-03-15",
            "category": "Cultural",
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def blog_payload():
    def build(**overrides):
        payload = {
            "title": "Hidden Gems of Asia",
            "excerpt": "Places most tourists never see.",
            "content": "Long form content about hidden gems.",
            "author": {"name": "Sarah Johnson", "avatar": "/images/authors/sarah.jpg", "bio": "Travel writer."},
            "publishedAt": "2024-03-01T10:30:00Z",
            "readTime": 8,
            "category": "Destinations",
            "tags": ["Asia", "Adventure"],
            "featuredImage": "https://images.example.com/gems.jpg",
            "seo": {
                "metaTitle": "Hidden Gems of Asia",
                "metaDescription": "Places most tourists never see.",
                "keywords": ["asia", "travel"],
            },
        }
        payload.update(overrides)
        return payload
    return build
