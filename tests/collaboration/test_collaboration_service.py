import io

import pytest

from hr_portal.collaboration.model import DocumentAttachment, Meeting
from hr_portal.collaboration.service import CollaborationService, validate_document
from hr_portal.core.constants import MAX_DOCUMENT_SIZE
from hr_portal.core.enums import DocumentAccess
from hr_portal.core.exceptions import ValidationError


class FakeCollaborationRepo:
    def __init__(self):
        self.meetings = []
        self.uploads = []
        self.permissions = []

    def create_meeting(self, fields):
        self.meetings.append(fields)
        return Meeting("m1", fields["title"], None, None, "u1", tuple(fields["attendees"]))

    def upload_document(self, *, project_id, file_name, content_type, stream):
        self.uploads.append((project_id, file_name, content_type, stream.read()))
        return DocumentAttachment("d1", file_name, 3, content_type, "/files/d1", "u1", project_id)

    def update_permissions(self, document_id, permissions):
        self.permissions.append((document_id, list(permissions)))
        return True


def _meeting(**overrides):
    data = {
        "title": "Sprint review",
        "date": "2025-03-12",
        "startTime": "14:00",
        "endTime": "15:00",
        "attendees": ["u2", "u3"],
    }
    data.update(overrides)
    return data


def test_meeting_from_date_and_clock_times():
    repo = FakeCollaborationRepo()

    CollaborationService(repo).save_meeting(data=_meeting())

    fields = repo.meetings[0]
    assert fields["startTime"].startswith("2025-03-12T14:00:00")
    assert fields["endTime"].startswith("2025-03-12T15:00:00")
    assert fields["recurringPattern"] is None


def test_meeting_accepts_iso_timestamps():
    repo = FakeCollaborationRepo()

    CollaborationService(repo).save_meeting(
        data=_meeting(date="", startTime="2025-03-12T09:00:00", endTime="2025-03-12T09:30:00")
    )

    assert repo.meetings[0]["startTime"].startswith("2025-03-12T09:00:00")


def test_meeting_keeps_the_utc_offset():
    repo = FakeCollaborationRepo()

    CollaborationService(repo).save_meeting(
        data=_meeting(date="", startTime="2025-03-12T09:00:00+07:00", endTime="2025-03-12T10:00:00+07:00")
    )

    assert repo.meetings[0]["startTime"] == "2025-03-12T09:00:00+07:00"
    assert repo.meetings[0]["endTime"] == "2025-03-12T10:00:00+07:00"


def test_meeting_mixes_utc_timestamp_and_clock_time():
    repo = FakeCollaborationRepo()
    service = CollaborationService(repo)

    # 23:59 local on the 12th is after 09:00 at +14:00 in every zone.
    service.save_meeting(data=_meeting(startTime="2025-03-12T09:00:00+14:00", endTime="23:59"))
    assert repo.meetings[0]["startTime"] == "2025-03-12T09:00:00+14:00"

    with pytest.raises(ValidationError, match="End time must be after"):
        service.save_meeting(data=_meeting(startTime="2025-03-13T12:00:00Z", endTime="00:00"))


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": " "}, "Title"),
        ({"endTime": "13:00"}, "End time must be after"),
        ({"endTime": "14:00"}, "End time must be after"),
        ({"attendees": []}, "attendee"),
        ({"isVirtual": True}, "meeting link"),
    ],
)
def test_meeting_validation(overrides, message):
    repo = FakeCollaborationRepo()

    with pytest.raises(ValidationError, match=message):
        CollaborationService(repo).save_meeting(data=_meeting(**overrides))
    assert repo.meetings == []


def test_upload_sanitizes_file_name():
    repo = FakeCollaborationRepo()

    doc = CollaborationService(repo).upload_document(
        project_id="p1",
        file_name="../../minutes march.pdf",
        content_type="application/pdf",
        stream=io.BytesIO(b"pdf"),
    )

    assert doc.file_name == "minutes_march.pdf"
    assert repo.uploads == [("p1", "minutes_march.pdf", "application/pdf", b"pdf")]


def test_upload_rejects_disallowed_type_and_size():
    with pytest.raises(ValidationError, match="not allowed"):
        validate_document("run.sh", "application/x-sh", 10)
    with pytest.raises(ValidationError, match="10MB"):
        validate_document("big.pdf", "application/pdf", MAX_DOCUMENT_SIZE + 1)
    assert validate_document("ok.pdf", "application/pdf", MAX_DOCUMENT_SIZE) == "ok.pdf"


def test_upload_needs_project():
    with pytest.raises(ValidationError, match="project"):
        CollaborationService(FakeCollaborationRepo()).upload_document(
            project_id="", file_name="a.pdf", content_type="application/pdf", stream=io.BytesIO(b"x")
        )


def test_update_permissions_parses_access():
    repo = FakeCollaborationRepo()
    service = CollaborationService(repo)

    service.update_permissions(document_id="d1", permissions=[{"userId": "u2", "access": "edit"}])
    assert repo.permissions[0][1][0].access == DocumentAccess.EDIT

    with pytest.raises(ValidationError):
        service.update_permissions(document_id="d1", permissions=[{"userId": "u2", "access": "own"}])
