"""
Add the one-appointment-per-slot constraint to tb_agendamento

Migration to add:
- uq_agendamento_slot UNIQUE (data_agendamento, hora_agendamento)

Databases created before the constraint existed may already hold
double-booked slots; those are listed and the migration stops so they can
be resolved by hand.

Run with: python migrations/add_appointment_slot_unique_constraint.py
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import text

from app.config import DB_SCHEMA
from app.database import engine
from app.models import SLOT_CONSTRAINT_NAME

TABLE = f"{DB_SCHEMA}.tb_agendamento" if DB_SCHEMA else "tb_agendamento"


def find_duplicate_slots(conn) -> list:
    """Slots booked more than once"""
    result = conn.execute(text(f"""
        SELECT data_agendamento, hora_agendamento, COUNT(*) AS total
        FROM {TABLE}
        GROUP BY data_agendamento, hora_agendamento
        HAVING COUNT(*) > 1
        ORDER BY data_agendamento, hora_agendamento
    """))
    return list(result)


def upgrade() -> bool:
    """Add the slot constraint; returns False when duplicates block it"""
    with engine.connect() as conn:
        # Check if the constraint already exists to make migration idempotent
        result = conn.execute(
            text("""
                SELECT constraint_name
                FROM information_schema.table_constraints
                WHERE table_name = 'tb_agendamento'
                AND constraint_name = :name
            """),
            {"name": SLOT_CONSTRAINT_NAME},
        )
        if result.first():
            print(f"ℹ️  {SLOT_CONSTRAINT_NAME} already exists")
            return True

        duplicates = find_duplicate_slots(conn)
        if duplicates:
            print(f"❌ {len(duplicates)} slot(s) booked more than once:")
            for row in duplicates:
                print(f"   {row.data_agendamento} {row.hora_agendamento} ({row.total} agendamentos)")
            return False

        conn.execute(text(f"""
            ALTER TABLE {TABLE}
            ADD CONSTRAINT {SLOT_CONSTRAINT_NAME} UNIQUE (data_agendamento, hora_agendamento)
        """))
        conn.commit()
        print(f"✅ Added {SLOT_CONSTRAINT_NAME}")
        print("\n✅ Migration completed successfully!")
        return True


def downgrade():
    """Remove the slot constraint"""
    with engine.connect() as conn:
        conn.execute(text(f"ALTER TABLE {TABLE} DROP CONSTRAINT IF EXISTS {SLOT_CONSTRAINT_NAME}"))
        conn.commit()
        print("✅ Migration rolled back successfully!")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Manage appointment slot constraint migration")
    parser.add_argument("--down", action="store_true", help="Rollback the migration")
    args = parser.parse_args()

    if args.down:
        print("Rolling back migration...")
        downgrade()
    else:
        print("Running migration...")
        if not upgrade():
            sys.exit(1)
