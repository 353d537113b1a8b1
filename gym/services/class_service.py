"""Class catalog: workout classes owned by trainers."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from gym.domain.entities import WorkoutClass
from gym.repositories.sql_repository import SQLRepository
from gym.services.errors import NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass
class ClassService:
    """Only the trainer who created a class may change or remove it.

    Ownership is checked by re-reading the stored class and comparing trainer
    ids; the repository statements also filter on the trainer id.
    """

    repository: SQLRepository = field(default_factory=SQLRepository)

    def create(self, type: str, description: str, trainer_id: int) -> WorkoutClass:
        workout_class = self.repository.create_class(
            type=(type or "").strip(),
            description=(description or "").strip(),
            trainer_id=trainer_id,
        )
        logger.info("Trainer %s created class %s", trainer_id, workout_class.id)
        return workout_class

    def get_by_id(self, class_id: int) -> WorkoutClass:
        workout_class = self.repository.get_class(class_id)
        if workout_class is None:
            raise NotFoundError("Workout class not found")
        return workout_class

    def list_by_trainer(self, trainer_id: int) -> list[WorkoutClass]:
        return self.repository.list_classes(trainer_id=trainer_id)

    def list_all(self) -> list[WorkoutClass]:
        return self.repository.list_classes()

    def _require_owner(self, class_id: int, trainer_id: int, action: str) -> WorkoutClass:
        existing = self.repository.get_class(class_id)
        if existing is None or existing.trainer_id != trainer_id:
            raise UnauthorizedError(f"Unauthorized to {action} this workout class")
        return existing

    def update(self, workout_class: WorkoutClass) -> bool:
        self._require_owner(workout_class.id, workout_class.trainer_id, "update")
        workout_class.type = (workout_class.type or "").strip()
        workout_class.description = (workout_class.description or "").strip()
        return self.repository.update_class(workout_class)

    def delete(self, class_id: int, trainer_id: int) -> bool:
        self._require_owner(class_id, trainer_id, "delete")
        deleted = self.repository.delete_class(class_id, trainer_id)
        if deleted:
            logger.info("Trainer %s deleted class %s", trainer_id, class_id)
        return deleted
