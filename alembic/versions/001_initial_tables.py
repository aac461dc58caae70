"""Initial tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


sport_division = postgresql.ENUM('men', 'women', 'mixed', name='sportdivision', create_type=False)
sport_level = postgresql.ENUM('elementary', 'high_school', 'college', name='sportlevel', create_type=False)
competition_stage = postgresql.ENUM(
    'group_stage', 'playins', 'playoffs', 'finals', name='competitionstage', create_type=False
)
match_status = postgresql.ENUM(
    'upcoming', 'ongoing', 'finished', 'cancelled', name='matchstatus', create_type=False
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.execute("CREATE TYPE sportdivision AS ENUM ('men', 'women', 'mixed')")
    op.execute("CREATE TYPE sportlevel AS ENUM ('elementary', 'high_school', 'college')")
    op.execute("CREATE TYPE competitionstage AS ENUM ('group_stage', 'playins', 'playoffs', 'finals')")
    op.execute("CREATE TYPE matchstatus AS ENUM ('upcoming', 'ongoing', 'finished', 'cancelled')")

    # Seasons
    op.create_table(
        'seasons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('number'),
    )

    # Sports and their division/level categories
    op.create_table(
        'sports',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'sports_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('sport_id', sa.Integer(), nullable=False),
        sa.Column('division', sport_division, nullable=False),
        sa.Column('levels', sport_level, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['sport_id'], ['sports.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sport_id', 'division', 'levels', name='uq_sports_categories_sport_division_levels'),
    )
    op.create_index('ix_sports_categories_sport_id', 'sports_categories', ['sport_id'])

    # Schools and their teams
    op.create_table(
        'schools',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('abbreviation', sa.String(length=20), nullable=False),
        sa.Column('logo_url', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'schools_teams',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('school_id', sa.Integer(), nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('sport_category_id', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['school_id'], ['schools.id']),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['sport_category_id'], ['sports_categories.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_schools_teams_school_id', 'schools_teams', ['school_id'])
    op.create_index('ix_schools_teams_season_id', 'schools_teams', ['season_id'])
    op.create_index('ix_schools_teams_sport_category_id', 'schools_teams', ['sport_category_id'])

    # Competition stages
    op.create_table(
        'sports_seasons_stages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('competition_stage', competition_stage, nullable=False),
        sa.Column('order_index', sa.Integer(), server_default='0', nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('sport_category_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['sport_category_id'], ['sports_categories.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_sports_seasons_stages_season_category',
        'sports_seasons_stages',
        ['season_id', 'sport_category_id'],
    )

    # Matches, participants, games, game scores
    op.create_table(
        'matches',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('best_of', sa.Integer(), server_default='1', nullable=False),
        sa.Column('status', match_status, server_default='upcoming', nullable=False),
        sa.Column('stage_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['stage_id'], ['sports_seasons_stages.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_matches_stage_id', 'matches', ['stage_id'])
    op.create_index('ix_matches_stage_scheduled_at', 'matches', ['stage_id', 'scheduled_at'])

    op.create_table(
        'match_participants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('match_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Uuid(), nullable=False),
        sa.Column('match_score', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['match_id'], ['matches.id']),
        sa.ForeignKeyConstraint(['team_id'], ['schools_teams.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('match_id', 'team_id', name='uq_match_participants_match_team'),
    )
    op.create_index('ix_match_participants_match_id', 'match_participants', ['match_id'])
    op.create_index('ix_match_participants_team_id', 'match_participants', ['team_id'])

    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('match_id', sa.Integer(), nullable=False),
        sa.Column('game_number', sa.Integer(), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['match_id'], ['matches.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('match_id', 'game_number', name='uq_games_match_game_number'),
    )
    op.create_index('ix_games_match_id', 'games', ['match_id'])

    op.create_table(
        'game_scores',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('game_id', sa.Integer(), nullable=False),
        sa.Column('match_participant_id', sa.Integer(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['game_id'], ['games.id']),
        sa.ForeignKeyConstraint(['match_participant_id'], ['match_participants.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('game_id', 'match_participant_id', name='uq_game_scores_game_participant'),
    )
    op.create_index('ix_game_scores_game_id', 'game_scores', ['game_id'])
    op.create_index('ix_game_scores_match_participant_id', 'game_scores', ['match_participant_id'])


def downgrade() -> None:
    op.drop_table('game_scores')
    op.drop_table('games')
    op.drop_table('match_participants')
    op.drop_table('matches')
    op.drop_table('sports_seasons_stages')
    op.drop_table('schools_teams')
    op.drop_table('schools')
    op.drop_table('sports_categories')
    op.drop_table('sports')
    op.drop_table('seasons')

    op.execute("DROP TYPE matchstatus")
    op.execute("DROP TYPE competitionstage")
    op.execute("DROP TYPE sportlevel")
    op.execute("DROP TYPE sportdivision")
