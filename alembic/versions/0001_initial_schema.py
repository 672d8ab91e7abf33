"""Initial school schema

Revision ID: 0001
Revises:
Create Date: 2025-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'filieres',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nom', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('objectifs', sa.Text(), nullable=True),
        sa.Column('programme', sa.Text(), nullable=True),
        sa.Column('modalites', sa.Text(), nullable=True),
        sa.Column('accessibilite', sa.Text(), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'personnel',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nom', sa.String(length=255), nullable=True),
        sa.Column('prenom', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=100), nullable=True),
        sa.Column('cv', sa.Text(), nullable=True),
        sa.Column('experience', sa.Text(), nullable=True),
        sa.Column('certifications', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'formations_formateurs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('personnel_id', sa.Integer(), nullable=False),
        sa.Column('nom_formation', sa.String(length=255), nullable=True),
        sa.Column('organisme', sa.String(length=255), nullable=True),
        sa.Column('date_obtention', sa.Date(), nullable=True),
        sa.Column('certificat_pdf', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['personnel_id'], ['personnel.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_formations_formateurs_personnel_id', 'formations_formateurs', ['personnel_id'], unique=False)

    op.create_table(
        'promotions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nom', sa.String(length=255), nullable=False),
        sa.Column('photo', sa.Text(), nullable=True),
        sa.Column('referent_id', sa.Integer(), nullable=True),
        sa.Column('date_debut', sa.Date(), nullable=True),
        sa.Column('date_fin', sa.Date(), nullable=True),
        sa.Column('date_debut_examen', sa.Date(), nullable=True),
        sa.Column('date_fin_examen', sa.Date(), nullable=True),
        sa.Column('stage_obligatoire', sa.Boolean(), nullable=False, default=False),
        sa.Column('filiere_id', sa.Integer(), nullable=True),
        sa.Column('objectifs', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['filiere_id'], ['filieres.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['referent_id'], ['personnel.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_promotions_filiere_id', 'promotions', ['filiere_id'], unique=False)
    op.create_index('ix_promotions_referent_id', 'promotions', ['referent_id'], unique=False)

    op.create_table(
        'apprenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nom', sa.String(length=255), nullable=True),
        sa.Column('prenom', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('telephone', sa.String(length=50), nullable=True),
        sa.Column('statut', sa.String(length=50), nullable=False, default='inscrit'),
        sa.Column('promo_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['promo_id'], ['promotions.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_apprenants_promo_id', 'apprenants', ['promo_id'], unique=False)

    op.create_table(
        'commentaires',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('apprenant_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=True),
        sa.Column('contenu', sa.Text(), nullable=True),
        sa.Column('date_creation', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['apprenant_id'], ['apprenants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_commentaires_apprenant_id', 'commentaires', ['apprenant_id'], unique=False)

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('filiere_id', sa.Integer(), nullable=True),
        sa.Column('question', sa.Text(), nullable=True),
        sa.Column('bonne_reponse', sa.Text(), nullable=False),
        sa.Column('mauvaise1', sa.Text(), nullable=True),
        sa.Column('mauvaise2', sa.Text(), nullable=True),
        sa.Column('mauvaise3', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['filiere_id'], ['filieres.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_questions_filiere_id', 'questions', ['filiere_id'], unique=False)

    op.create_table(
        'candidatures',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nom', sa.String(length=255), nullable=True),
        sa.Column('prenom', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('motivation', sa.Text(), nullable=True),
        sa.Column('filiere_id', sa.Integer(), nullable=True),
        sa.Column('score', sa.Integer(), nullable=False, default=0),
        sa.Column('date_candidature', sa.DateTime(), nullable=False),
        sa.Column('statut', sa.String(length=50), nullable=True, default='en_attente'),
        sa.Column('decision_admin', sa.Text(), nullable=True),
        sa.Column('justification_refus', sa.Text(), nullable=True),
        sa.Column('date_decision', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_candidatures_filiere_id', 'candidatures', ['filiere_id'], unique=False)
    op.create_index('ix_candidatures_date_candidature', 'candidatures', ['date_candidature'], unique=False)
    op.create_index('ix_candidatures_statut', 'candidatures', ['statut'], unique=False)

    op.create_table(
        'reponses_candidature',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('candidature_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('reponse_donnee', sa.Text(), nullable=False),
        sa.Column('est_correct', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['candidature_id'], ['candidatures.id']),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_reponses_candidature_candidature_id', 'reponses_candidature', ['candidature_id'], unique=False)
    op.create_index('ix_reponses_candidature_question_id', 'reponses_candidature', ['question_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_reponses_candidature_question_id', table_name='reponses_candidature')
    op.drop_index('ix_reponses_candidature_candidature_id', table_name='reponses_candidature')
    op.drop_table('reponses_candidature')
    op.drop_index('ix_candidatures_statut', table_name='candidatures')
    op.drop_index('ix_candidatures_date_candidature', table_name='candidatures')
    op.drop_index('ix_candidatures_filiere_id', table_name='candidatures')
    op.drop_table('candidatures')
    op.drop_index('ix_questions_filiere_id', table_name='questions')
    op.drop_table('questions')
    op.drop_index('ix_commentaires_apprenant_id', table_name='commentaires')
    op.drop_table('commentaires')
    op.drop_index('ix_apprenants_promo_id', table_name='apprenants')
    op.drop_table('apprenants')
    op.drop_index('ix_promotions_referent_id', table_name='promotions')
    op.drop_index('ix_promotions_filiere_id', table_name='promotions')
    op.drop_table('promotions')
    op.drop_index('ix_formations_formateurs_personnel_id', table_name='formations_formateurs')
    op.drop_table('formations_formateurs')
    op.drop_table('personnel')
    op.drop_table('filieres')
