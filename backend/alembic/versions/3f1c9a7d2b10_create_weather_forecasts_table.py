"""Create weather_forecasts table

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2025-07-14 10:22:41.503118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

weather_condition = sa.Enum(
    'sunny', 'cloudy', 'rainy', 'stormy', 'snowy', 'partly_cloudy',
    name='weather_condition',
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'weather_forecasts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('temperature_high', sa.Float(), nullable=False),
        sa.Column('temperature_low', sa.Float(), nullable=False),
        sa.Column('condition', weather_condition, nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('humidity', sa.Integer(), nullable=False),
        sa.Column('wind_speed', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    # (city, date) is indexed for filtering but deliberately not unique
    op.create_index(op.f('ix_weather_forecasts_id'), 'weather_forecasts', ['id'], unique=False)
    op.create_index(op.f('ix_weather_forecasts_city'), 'weather_forecasts', ['city'], unique=False)
    op.create_index(op.f('ix_weather_forecasts_date'), 'weather_forecasts', ['date'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_weather_forecasts_date'), table_name='weather_forecasts')
    op.drop_index(op.f('ix_weather_forecasts_city'), table_name='weather_forecasts')
    op.drop_index(op.f('ix_weather_forecasts_id'), table_name='weather_forecasts')
    op.drop_table('weather_forecasts')
    weather_condition.drop(op.get_bind(), checkfirst=True)
