from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from edunotes.core.logging import get_logger
from edunotes.dependencies import get_portal, get_viewer_semester, require_admin
from edunotes.schemas.note_schema import NoteSummary
from edunotes.schemas.types import ALL
from edunotes.services.file_codec import content_disposition
from edunotes.services.portal import Portal
from edunotes.services.search_service import group_by_semester

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=List[NoteSummary])
def search_notes(
        q: Optional[str] = Query(None, description="Text matched against title, subject, description and tags"),
        semester: str = Query(ALL, description="'all' or a semester number"),
        subject: str = Query(ALL, description="'all' or an exact subject"),
        viewer_semester: Optional[int] = Depends(get_viewer_semester),
        portal: Portal = Depends(get_portal)
):
    """Notes visible to the caller, filtered"""
    notes = portal.search.search(q, semester, subject, viewer_semester)
    return [NoteSummary.from_note(note) for note in notes]


@router.get("/recent", response_model=List[NoteSummary])
def recent_notes(
        viewer_semester: Optional[int] = Depends(get_viewer_semester),
        portal: Portal = Depends(get_portal)
):
    return [NoteSummary.from_note(note) for note in portal.recent_for(viewer_semester)]


@router.get("/subjects", response_model=List[str])
def subjects(portal: Portal = Depends(get_portal)):
    return portal.notes.unique_subjects()


@router.get("/by-semester", response_model=Dict[str, List[NoteSummary]])
def notes_by_semester(
        viewer_semester: Optional[int] = Depends(get_viewer_semester),
        portal: Portal = Depends(get_portal)
):
    notes = portal.search.search(viewer_semester=viewer_semester)
    return {
        str(semester): [NoteSummary.from_note(note) for note in group]
        for semester, group in group_by_semester(notes).items()
    }


@router.get("/{note_id}/download")
def download_note(
        note_id: str,
        viewer_semester: Optional[int] = Depends(get_viewer_semester),
        portal: Portal = Depends(get_portal)
):
    note, content, content_type = portal.download(note_id, viewer_semester)
    return Response(
        content=content,
        media_type=content_type,
        headers={"Content-Disposition": content_disposition(note.file_name)}
    )


@router.post("", response_model=NoteSummary, status_code=status.HTTP_201_CREATED)
def upload_note(
        title: str = Form(...),
        subject: str = Form(...),
        semester: str = Form(...),
        description: Optional[str] = Form(None),
        tags: Optional[str] = Form(None, description="Comma-separated tags"),
        file: UploadFile = File(..., description="PDF or Word document"),
        _: bool = Depends(require_admin),
        portal: Portal = Depends(get_portal)
):
    content = file.file.read()
    note = portal.admin.upload_material(
        title=title,
        subject=subject,
        semester=semester,
        file_name=file.filename or "",
        content=content,
        content_type=file.content_type,
        description=description,
        tags=tags,
    )
    return NoteSummary.from_note(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
        note_id: str,
        _: bool = Depends(require_admin),
        portal: Portal = Depends(get_portal)
):
    portal.notes.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
