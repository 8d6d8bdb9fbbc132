"""진행도 Service: 저장소 ↔ Core 연결

Core는 순수 함수만 제공하고, 상태 로드/저장과 파생값 갱신은 이 계층에서 한다.
스냅샷은 항상 전체 재계산한다.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, timezone
from typing import Optional

from liferpg.config import settings
from liferpg.core.analytics.analyzers import (
    analyze_behavior,
    analyze_daily_metric,
    analyze_quests,
    analyze_reviews,
)
from liferpg.core.analytics.envelope import MetricAnalysisEnvelope
from liferpg.core.dates import to_iso_day, today
from liferpg.core.logging import get_logger, setup_logging
from liferpg.core.metabolic.dynamic_tdee import DynamicTdeeResult, compute_dynamic_tdee
from liferpg.core.metabolic.profile_metrics import compute_tdee
from liferpg.core.models import (
    REVIEW_STRUCTURED_FIELDS,
    REVIEW_TYPES,
    AppState,
    DailyEntry,
    Profile,
)
from liferpg.core.progression.quests import QUESTS
from liferpg.core.progression.snapshot import ProgressionSnapshot, compute_progression
from liferpg.core.validation import (
    EntryValidation,
    is_editable,
    validate_entry,
    validate_profile,
)
from liferpg.services.state_store import StateStore

logger = get_logger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProgressionService:
    """엔트리 저장 + 진행도/분석 조회"""

    def __init__(
        self,
        store: StateStore,
        reference_date: Optional[date] = None,
    ) -> None:
        self._store = store
        self._reference_date = reference_date
        self._state: AppState = store.load()

    @property
    def state(self) -> AppState:
        return self._state

    def _reference(self) -> date:
        return self._reference_date or today()

    # === 조회 ===

    def snapshot(self) -> ProgressionSnapshot:
        return compute_progression(
            self._state.entries.values(),
            self._state.accepted_quests,
            self._state.profile,
            self._reference(),
        )

    def dynamic_tdee(self) -> DynamicTdeeResult:
        return compute_dynamic_tdee(
            self._state.profile,
            self._state.entries.values(),
            settings.DYNAMIC_TDEE_WINDOW_DAYS,
        )

    def analyze(
        self,
        area: str,
        metric_key: Optional[str] = None,
        window_days: Optional[int] = None,
    ) -> MetricAnalysisEnvelope:
        """area: "daily" | "behavior" | "quests" | "reviews"."""
        days = window_days or settings.DEFAULT_WINDOW_DAYS
        reference = self._reference()
        if area == "daily":
            return analyze_daily_metric(self._state, metric_key or "", days, reference)
        if area == "behavior":
            return analyze_behavior(self._state, days, reference)
        if area == "quests":
            return analyze_quests(self._state, days, reference)
        if area == "reviews":
            return analyze_reviews(self._state, days)
        raise ValueError(f"Unknown analytics area: {area}")

    # === 변경 ===

    def accept_quest(self, quest_id: str) -> None:
        if quest_id not in QUESTS:
            raise ValueError(f"Unknown quest: {quest_id}")
        self._state.accepted_quests[quest_id] = True
        self._store.save(self._state)
        logger.info("Quest accepted: %s", quest_id)

    def upsert_entry(
        self, entry: DailyEntry, now: Optional[datetime] = None
    ) -> EntryValidation:
        """검증 후 저장. 수정 기한 초과나 hard error는 ValueError.

        반환값의 soft_warnings/anomalies는 저장된 뒤의 안내용.
        """
        existing = self._state.entries.get(entry.date)
        if existing is not None and not is_editable(entry.date, now):
            raise ValueError(
                f"Entry {entry.date.isoformat()} is read-only; edit window has expired"
            )

        validation = validate_entry(entry)
        if not validation.is_valid:
            raise ValueError("; ".join(validation.hard_errors))

        stamp = now.isoformat() if now is not None else _utc_now_iso()
        stored = dataclasses.replace(
            entry,
            created_at=existing.created_at if existing and existing.created_at else stamp,
            updated_at=stamp,
            is_anomalous=bool(validation.anomalies),
            anomaly_notes=tuple(validation.anomalies),
        )
        self._state.entries[entry.date] = stored
        self._refresh_derived_profile()
        self._store.save(self._state)

        logger.info(
            "Entry %s for %s (anomalies=%d)",
            "updated" if existing else "saved",
            entry.date.isoformat(),
            len(validation.anomalies),
        )
        return validation

    def update_profile(self, profile: Profile) -> Profile:
        """범위 검증 후 저장. 파생 TDEE는 저장 직전 재계산."""
        errors = validate_profile(profile)
        if errors:
            messages = [m for field_errors in errors.values() for m in field_errors]
            raise ValueError("; ".join(messages))

        self._state.profile = dataclasses.replace(profile, updated_at=_utc_now_iso())
        self._refresh_derived_profile()
        self._store.save(self._state)
        logger.info("Profile saved (baseline_tdee=%s)", self._state.profile.baseline_tdee)
        return self._state.profile

    def refresh_profile(self) -> Profile:
        self._refresh_derived_profile()
        self._store.save(self._state)
        return self._state.profile

    def _refresh_derived_profile(self) -> None:
        profile = self._state.profile
        baseline = compute_tdee(profile)
        dynamic = None
        if baseline is not None and profile.dynamic_tdee_enabled:
            dynamic = self.dynamic_tdee().dynamic_tdee
        self._state.profile = dataclasses.replace(
            profile, baseline_tdee=baseline, dynamic_tdee=dynamic
        )

    def save_review(
        self,
        review_type: str,
        period: Optional[date],
        prompts: dict[str, str],
        now: Optional[datetime] = None,
    ) -> dict[str, str]:
        """주간/월간 회고 저장. 같은 기간이면 덮어쓴다.

        period는 주간이면 주 시작일, 월간이면 해당 월의 아무 날짜.
        """
        if review_type not in REVIEW_TYPES:
            raise ValueError(f"Unknown review type: {review_type}")

        cleaned = {
            key: str(prompts.get(key) or "").strip() for key in REVIEW_STRUCTURED_FIELDS
        }
        if period is None or not any(cleaned.values()):
            label = "a week start date" if review_type == "weekly" else "a month date"
            raise ValueError(
                f"{review_type.capitalize()} review requires {label} "
                "and at least one prompt field."
            )

        payload = {
            **cleaned,
            "updatedAt": now.isoformat() if now is not None else _utc_now_iso(),
        }
        self._state.reviews.setdefault(review_type, {})[to_iso_day(period)] = payload
        self._store.save(self._state)
        logger.info("%s review saved for %s", review_type, to_iso_day(period))
        return payload

    def delete_review(self, review_type: str, period: str) -> None:
        reviews = self._state.reviews.get(review_type, {})
        if period not in reviews:
            raise ValueError("Selected review no longer exists.")
        del reviews[period]
        self._store.save(self._state)
        logger.info("%s review deleted for %s", review_type, period)

    def reset(self) -> None:
        self._state = self._store.reset()
        logger.info("Account reset")


def create_progression_service(
    state_path: Optional[str] = None,
    reference_date: Optional[date] = None,
) -> ProgressionService:
    """기동 시 1회: 로깅 설정 + 설정 경로의 저장소로 Service 생성."""
    setup_logging(settings.LOG_LEVEL)
    store = StateStore(state_path or settings.STATE_PATH)
    logger.info("Progression service ready (state=%s)", store.path)
    return ProgressionService(store, reference_date=reference_date)
