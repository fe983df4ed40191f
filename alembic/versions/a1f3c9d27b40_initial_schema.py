"""initial_schema

Revision ID: a1f3c9d27b40
Revises:
Create Date: 2026-10-19 10:00:00.000000

사진 앨범 테이블 생성: users, albums, photos, likes, comments, replies.
Create photo album tables: users, albums, photos, likes, comments, replies.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'a1f3c9d27b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # users — 사용자 계정 (username unique)
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # albums — 사용자 소유 앨범
    op.create_table(
        'albums',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_albums_user_id', 'albums', ['user_id'])

    # photos — 앨범 내 사진, number_of_likes는 likes 행 수와 동일
    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(1024), nullable=True),
        sa.Column('album_id', sa.Integer(), sa.ForeignKey('albums.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('number_of_likes', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('date_of_add', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_photos_album_id', 'photos', ['album_id'])
    op.create_index('ix_photos_user_id', 'photos', ['user_id'])

    # likes — 사진당 사용자 1회
    op.create_table(
        'likes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('photo_id', 'user_id', name='uq_like_photo_user'),
    )

    # comments / replies — 댓글 스레드
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_comments_photo_id', 'comments', ['photo_id'])

    op.create_table(
        'replies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('comment_id', sa.Integer(), sa.ForeignKey('comments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_replies_comment_id', 'replies', ['comment_id'])


def downgrade() -> None:
    op.drop_index('ix_replies_comment_id', table_name='replies')
    op.drop_table('replies')
    op.drop_index('ix_comments_photo_id', table_name='comments')
    op.drop_table('comments')
    op.drop_table('likes')
    op.drop_index('ix_photos_user_id', table_name='photos')
    op.drop_index('ix_photos_album_id', table_name='photos')
    op.drop_table('photos')
    op.drop_index('ix_albums_user_id', table_name='albums')
    op.drop_table('albums')
    op.drop_table('users')
