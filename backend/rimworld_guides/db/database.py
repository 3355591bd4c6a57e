from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
import json
import logging
import sqlite3
import threading
from ..core.config import get_settings
from ..core.errors import StorageError
from ..models.guide import GuideCreate, GuideQuery, TipCreate
from .query import WhereBuilder
from .seed import SEED_GUIDES, SEED_TIPS

logger = logging.getLogger("db")

SEARCH_COLUMNS = ('title', 'description', 'content')

GUIDES_DDL = """
    CREATE TABLE IF NOT EXISTS guides (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        slug TEXT NOT NULL UNIQUE,
        title TEXT NOT NULL,
        description TEXT NOT NULL DEFAULT '',
        content TEXT NOT NULL DEFAULT '',
        difficulty TEXT NOT NULL,
        category TEXT NOT NULL,
        tags TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
"""

TIPS_DDL = """
    CREATE TABLE IF NOT EXISTS tips (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        category TEXT NOT NULL,
        difficulty TEXT NOT NULL
    )
"""


def _casefold(value: Optional[str]) -> Optional[str]:
    return value.casefold() if isinstance(value, str) else value


def encode_tags(tags: Sequence[str]) -> str:
    return json.dumps(list(tags))


def format_timestamp(value: Optional[datetime]) -> str:
    # Formato fijo en UTC: el orden lexicográfico coincide con el cronológico
    if value is None:
        value = datetime.now(timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


def guide_row(guide: GuideCreate) -> Dict[str, Any]:
    created = format_timestamp(guide.created_at)
    return {
        'slug': guide.slug,
        'title': guide.title,
        'description': guide.description,
        'content': guide.content,
        'difficulty': guide.difficulty,
        'category': guide.category,
        'tags': encode_tags(guide.tags),
        'created_at': created,
        'updated_at': created,
    }


class Database:
    """Almacén de guías sobre un archivo SQLite.

    Cada operación abre y cierra su propia conexión; no se comparte estado
    mutable entre peticiones salvo el flag de inicialización.
    """

    def __init__(
        self,
        path: Union[str, Path],
        seed_guides: Optional[Sequence[GuideCreate]] = None,
        seed_tips: Optional[Sequence[TipCreate]] = None,
    ) -> None:
        self.path = Path(path)
        self._seed_guides = list(SEED_GUIDES if seed_guides is None else seed_guides)
        self._seed_tips = list(SEED_TIPS if seed_tips is None else seed_tips)
        self._init_lock = threading.Lock()
        self.initialized = False

    @contextmanager
    def _connect(self, action: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as e:
            logger.error("No se pudo abrir la base %s (%s): %s", self.path, action, e)
            raise StorageError(f"Database unavailable during {action}", e) from e
        conn.row_factory = sqlite3.Row
        conn.create_function('casefold', 1, _casefold, deterministic=True)
        try:
            yield conn
        except sqlite3.Error as e:
            logger.error("Error SQLite durante %s: %s", action, e)
            raise StorageError(f"Storage failure during {action}", e) from e
        finally:
            conn.close()

    async def initialize(self) -> bool:
        """Crea el esquema y siembra las tablas vacías. Devuelve True si insertó datos.

        Idempotente: tras la primera ejecución exitosa no vuelve a tocar el archivo.
        """
        with self._init_lock:
            if self.initialized:
                return False
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError("Database directory unavailable", e) from e
            seeded = False
            with self._connect('initialize') as conn:
                with conn:
                    conn.execute(GUIDES_DDL)
                    conn.execute(TIPS_DDL)
                    if conn.execute('SELECT COUNT(*) FROM guides').fetchone()[0] == 0 and self._seed_guides:
                        conn.executemany(
                            'INSERT INTO guides (slug, title, description, content, difficulty, category, tags, created_at, updated_at) '
                            'VALUES (:slug, :title, :description, :content, :difficulty, :category, :tags, :created_at, :updated_at)',
                            [guide_row(g) for g in self._seed_guides],
                        )
                        seeded = True
                    if conn.execute('SELECT COUNT(*) FROM tips').fetchone()[0] == 0 and self._seed_tips:
                        conn.executemany(
                            'INSERT INTO tips (title, content, category, difficulty) VALUES (?, ?, ?, ?)',
                            [(t.title, t.content, t.category, t.difficulty) for t in self._seed_tips],
                        )
                        seeded = True
            self.initialized = True
        logger.info("Base SQLite lista en %s (seeded=%s)", self.path, seeded)
        return seeded

    async def fetch_guides(self, query: GuideQuery) -> Tuple[List[Dict[str, Any]], int]:
        where, params = (
            WhereBuilder()
            .equals('category', query.category)
            .equals('difficulty', query.difficulty)
            .contains_any(SEARCH_COLUMNS, query.search)
            .build()
        )
        with self._connect('list guides') as conn:
            total = conn.execute(f'SELECT COUNT(*) FROM guides{where}', params).fetchone()[0]
            rows = conn.execute(
                f'SELECT * FROM guides{where} ORDER BY created_at DESC, id DESC LIMIT ? OFFSET ?',
                params + (query.limit, query.offset),
            ).fetchall()
        return [dict(r) for r in rows], total

    async def fetch_guide_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        with self._connect('get guide') as conn:
            row = conn.execute('SELECT * FROM guides WHERE slug = ? LIMIT 1', (slug,)).fetchone()
        return dict(row) if row else None

    async def count_guides(self) -> int:
        with self._connect('count guides') as conn:
            return conn.execute('SELECT COUNT(*) FROM guides').fetchone()[0]

    async def count_tips(self) -> int:
        with self._connect('count tips') as conn:
            return conn.execute('SELECT COUNT(*) FROM tips').fetchone()[0]


def _row_matches(row: Dict[str, Any], query: GuideQuery) -> bool:
    if query.category is not None and row['category'] != query.category:
        return False
    if query.difficulty is not None and row['difficulty'] != query.difficulty:
        return False
    if query.search is not None:
        term = query.search.casefold()
        return any(term in (row.get(col) or '').casefold() for col in SEARCH_COLUMNS)
    return True


class MemoryDatabase:
    """Respaldo en memoria con la misma interfaz y las mismas reglas de filtrado que Database."""

    def __init__(
        self,
        seed_guides: Optional[Sequence[GuideCreate]] = None,
        seed_tips: Optional[Sequence[TipCreate]] = None,
    ) -> None:
        self._seed_guides = list(SEED_GUIDES if seed_guides is None else seed_guides)
        self._seed_tips = list(SEED_TIPS if seed_tips is None else seed_tips)
        self._guides: List[Dict[str, Any]] = []
        self._tips: List[Dict[str, Any]] = []
        self._init_lock = threading.Lock()
        self.initialized = False

    async def initialize(self) -> bool:
        with self._init_lock:
            if self.initialized:
                return False
            seeded = False
            if not self._guides and self._seed_guides:
                self._guides = [
                    {'id': i, **guide_row(g)} for i, g in enumerate(self._seed_guides, start=1)
                ]
                seeded = True
            if not self._tips and self._seed_tips:
                self._tips = [
                    {'id': i, **t.model_dump()} for i, t in enumerate(self._seed_tips, start=1)
                ]
                seeded = True
            self.initialized = True
        logger.info("Almacén en memoria listo (guides=%d, tips=%d)", len(self._guides), len(self._tips))
        return seeded

    async def fetch_guides(self, query: GuideQuery) -> Tuple[List[Dict[str, Any]], int]:
        matching = [g for g in self._guides if _row_matches(g, query)]
        matching.sort(key=lambda g: (g['created_at'], g['id']), reverse=True)
        page = matching[query.offset:query.offset + query.limit]
        return [dict(g) for g in page], len(matching)

    async def fetch_guide_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        for g in self._guides:
            if g['slug'] == slug:
                return dict(g)
        return None

    async def count_guides(self) -> int:
        return len(self._guides)

    async def count_tips(self) -> int:
        return len(self._tips)


GuideStore = Union[Database, MemoryDatabase]

_db_instance: Optional[GuideStore] = None

def build_store() -> GuideStore:
    settings = get_settings()
    if settings.STORE_BACKEND == 'memory':
        return MemoryDatabase()
    return Database(settings.DATABASE_PATH)

async def get_db() -> GuideStore:
    global _db_instance
    if _db_instance is None:
        _db_instance = build_store()
    return _db_instance
