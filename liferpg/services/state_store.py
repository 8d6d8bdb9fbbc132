"""상태 저장소: 전체 상태를 JSON 파일 하나로 보관

단일 blob이라 마이그레이션이 단순하다. 읽기 실패 시 기본 상태로 시작한다.
"""

from __future__ import annotations

import json
from pathlib import Path

from liferpg.core.logging import get_logger
from liferpg.core.models import AppState
from liferpg.schemas import StoredState, state_from_raw

logger = get_logger(__name__)


class StateStore:
    """AppState ↔ JSON 파일"""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppState:
        """파일이 없거나 깨져 있으면 기본 상태."""
        if not self._path.exists():
            logger.info("No state file at %s, starting fresh", self._path)
            return state_from_raw({})

        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read state from %s: %s", self._path, e)
            return state_from_raw({})

        state = state_from_raw(raw)
        logger.info("Loaded %d entries from %s", len(state.entries), self._path)
        return state

    def save(self, state: AppState) -> None:
        payload = StoredState.from_app_state(state).model_dump(
            mode="json", by_alias=True
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self._path)
        logger.debug("Saved %d entries to %s", len(state.entries), self._path)

    def reset(self) -> AppState:
        """계정 초기화: 엔트리 포함 전체 삭제."""
        state = state_from_raw({})
        self.save(state)
        logger.info("State reset at %s", self._path)
        return state
