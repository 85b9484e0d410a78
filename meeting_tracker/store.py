"""In-memory meeting collection owned by the application."""
import copy
import itertools
import threading


class MeetingStore:
    """Holds the current meetings for the lifetime of the process.

    Callers always receive copies; the stored list is only changed through
    the methods below, and an import swaps the whole list at once.
    """

    def __init__(self, meetings=None):
        self._lock = threading.Lock()
        self._meetings = []
        self._ids = itertools.count(1)
        if meetings:
            self.replace_all(meetings)

    def _next_id(self):
        taken = {m.id for m in self._meetings}
        while True:
            candidate = str(next(self._ids))
            if candidate not in taken:
                return candidate

    def all(self):
        with self._lock:
            return copy.deepcopy(self._meetings)

    def __len__(self):
        return len(self._meetings)

    def get(self, meeting_id):
        with self._lock:
            for meeting in self._meetings:
                if meeting.id == meeting_id:
                    return copy.deepcopy(meeting)
        return None

    def add(self, meeting):
        """Stores a new meeting in front of the list under a fresh id."""
        meeting = copy.deepcopy(meeting)
        with self._lock:
            meeting.id = self._next_id()
            self._meetings.insert(0, meeting)
        return copy.deepcopy(meeting)

    def update(self, meeting):
        with self._lock:
            for index, existing in enumerate(self._meetings):
                if existing.id == meeting.id:
                    self._meetings[index] = copy.deepcopy(meeting)
                    return copy.deepcopy(meeting)
        raise KeyError(meeting.id)

    def delete(self, meeting_id):
        with self._lock:
            remaining = [m for m in self._meetings if m.id != meeting_id]
            if len(remaining) == len(self._meetings):
                raise KeyError(meeting_id)
            self._meetings = remaining

    def replace_all(self, meetings):
        """Replaces the whole collection, e.g. after an import."""
        meetings = copy.deepcopy(list(meetings))
        ids = [m.id for m in meetings]
        if any(not i for i in ids) or len(set(ids)) != len(ids):
            raise ValueError("Meeting identifiers must be non-empty and unique")
        with self._lock:
            self._meetings = meetings

    def search(self, term='', status=None):
        """Case-insensitive match on title or stakeholder, optionally by status."""
        term = (term or '').lower()
        matches = []
        for meeting in self.all():
            matches_term = term in meeting.stakeholder.lower() or term in meeting.title.lower()
            matches_status = status in (None, '', 'all') or meeting.status == status
            if matches_term and matches_status:
                matches.append(meeting)
        return matches

    def stats(self):
        meetings = self.all()
        return {
            'total': len(meetings),
            'scheduled': sum(1 for m in meetings if m.status == 'scheduled'),
            'completed': sum(1 for m in meetings if m.status == 'completed'),
            'stakeholders': len({m.stakeholder for m in meetings}),
        }
