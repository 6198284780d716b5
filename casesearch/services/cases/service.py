from typing import List, Optional

from casesearch.core.extensions import db
from casesearch.services import Service

from .models import Case


class CaseService(Service):
    """Lookup and persistence of cases, and of their tag registry."""

    name = "cases"

    def get_case(self, case_id: int) -> Optional[Case]:
        return db.session.get(Case, case_id)

    def all_cases(self) -> List[Case]:
        return db.session.execute(db.select(Case).order_by(Case.name)).scalars().all()

    def save_case(self, case: Case) -> None:
        db.session.add(case)
        db.session.commit()

    def add_tag(self, case: Case, tag: str) -> None:
        """Register `tag` as used in `case`. Saving is skipped when already
        registered."""
        if tag in case.tags:
            return
        case.add_tag(tag)
        self.save_case(case)
        self.logger.debug("Tag %r registered on case %r", tag, case.name)

    def remove_tag(self, case: Case, tag: str) -> None:
        case.remove_tag(tag)
        self.save_case(case)
        self.logger.debug("Tag %r unregistered from case %r", tag, case.name)
