"""
Model: DocumentRepository, DocumentFolder, DocumentFile
Tables: document_repositories, document_folders, document_files

One repository per (entity_type, entity_id). Folders nest through
parent_id; files point at objects in the documents bucket.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin


def _uuid():
    return str(uuid.uuid4())





class DocumentRepository(TimestampMixin, db.Model):
    """ File cabinet of one CRM record... """

    # Table Name
    __tablename__ = "document_repositories"
    __table_args__ = (
        db.UniqueConstraint("entity_type", "entity_id", name = "uq_document_repository_entity"),
    )

    id = db.Column(db.String(36), primary_key = True, default = _uuid)

    entity_type = db.Column(db.String(20), nullable = False)

    entity_id = db.Column(db.String(64), nullable = False)

    # Relationship
    folders = db.relationship(
        "DocumentFolder",
        back_populates = "repository",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<DocumentRepository {self.entity_type}:{self.entity_id}>"





class DocumentFolder(TimestampMixin, db.Model):
    """ Folder inside a repository... """

    # Table Name
    __tablename__ = "document_folders"

    id = db.Column(db.String(36), primary_key = True, default = _uuid)

    repository_id = db.Column(
        db.String(36),
        db.ForeignKey("document_repositories.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    parent_id = db.Column(
        db.String(36),
        db.ForeignKey("document_folders.id", ondelete = "CASCADE"),
        nullable = True
    )

    name = db.Column(db.String(255), nullable = False)

    # Relationships
    repository = db.relationship("DocumentRepository", back_populates = "folders")

    children = db.relationship(
        "DocumentFolder",
        cascade = "all, delete-orphan",
        backref = db.backref("parent", remote_side = [id])
    )

    files = db.relationship(
        "DocumentFile",
        back_populates = "folder",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<DocumentFolder {self.name}>"





class DocumentFile(TimestampMixin, db.Model):
    """ Stored file... """

    # Table Name
    __tablename__ = "document_files"

    id = db.Column(db.String(36), primary_key = True, default = _uuid)

    folder_id = db.Column(
        db.String(36),
        db.ForeignKey("document_folders.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    name = db.Column(db.String(255), nullable = False)

    storage_path = db.Column(db.Text, nullable = False)

    # Relationship
    folder = db.relationship("DocumentFolder", back_populates = "files")

    def __repr__(self):
        return f"<DocumentFile {self.name}>"
