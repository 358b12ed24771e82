"""Seed a SQLite database with demo candidates and print the highlights."""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

os.environ.setdefault("TD_DB_BACKEND", "sqlite")
os.environ.setdefault("TD_LOG_LEVEL", "WARNING")

project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))
os.chdir(project_root)

DEMO_CANDIDATES: list[dict[str, object]] = [
    {
        "nombre": "María González",
        "email": "maria.gonzalez@email.com",
        "telefono": "+34 600 123 456",
        "categoria": "Editores",
        "area": "Postproducción",
        "jobTitle": "Editora de video",
        "skills": "Premiere, DaVinci, After Effects, color grading",
        "videoLink": "https://www.youtube.com/watch?v=ejemplo1",
        "reelLink": "https://www.instagram.com/reel/ejemplo1",
        "portfolioLink": "https://mariagonzalez.dev",
        "experiencia": "5 años de experiencia en edición",
        "educacion": "Comunicación Audiovisual",
        "notas": "Excelente candidata con gran portfolio",
        "score": 9.2,
    },
    {
        "nombre": "Juan Pérez",
        "email": "juan.perez@email.com",
        "telefono": "+34 600 234 567",
        "categoria": "Animación",
        "area": "Creatividad",
        "jobTitle": "Animador 2D / Motion",
        "skills": "After Effects, Motion, Illustrator, animación 2D",
        "videoLink": "https://www.youtube.com/watch?v=ejemplo2",
        "portfolioLink": "https://juanperez.design",
        "experiencia": "3 años en motion graphics",
        "educacion": "Diseño Gráfico",
        "notas": "Portfolio muy creativo",
        "score": 8.8,
    },
    {
        "nombre": "Ana Martínez",
        "email": "ana.martinez@email.com",
        "telefono": "+34 600 345 678",
        "categoria": "Editores",
        "area": "Comunicación",
        "jobTitle": "Editora de contenido",
        "skills": "Premiere, edición rápida, subtítulos, multicámara",
        "reelLink": "https://www.instagram.com/reel/ejemplo3",
        "portfolioLink": "https://anamartinez.marketing",
        "experiencia": "4 años en edición digital",
        "educacion": "Marketing y Publicidad",
        "notas": "Gran experiencia en redes sociales",
        "score": 7.5,
    },
    {
        "nombre": "Carlos Rodríguez",
        "email": "carlos.rodriguez@email.com",
        "categoria": "Diseño",
        "area": "Branding",
        "jobTitle": "Diseñador gráfico",
        "skills": "Illustrator, Photoshop, Figma",
        "portfolioLink": "https://carlosrodriguez.studio",
        "experiencia": "6 años en identidad visual",
    },
    {
        "nombre": "Lucía Fernández",
        "email": "lucia.fernandez@email.com",
        "area": "Sonido",
        "jobTitle": "Técnica de sonido",
        "skills": "Pro Tools, mezcla, foley",
        "score": 6.9,
    },
    {
        "nombre": "Pendiente de evaluación",
        "categoria": "Editores",
        "score": 42,
    },
]


async def main() -> None:
    """Insert the demo candidates and print the grouped highlights."""
    from talent_directory_core.config.settings import Settings
    from talent_directory_core.models.candidate import CandidateFields
    from talent_directory_core.interfaces import CandidateSource
    from talent_directory_engine.directory import CandidateDirectory
    from talent_directory_infra.db.repositories.candidate_repo import CandidateRepository
    from talent_directory_infra.db.session import session_scope

    settings = Settings()
    async with session_scope(settings) as session:
        source: CandidateSource = CandidateRepository(session)
        for row in DEMO_CANDIDATES:
            await source.create(CandidateFields.model_validate(row))
        await session.commit()
        directory = await CandidateDirectory.from_source(source)

    print(f"=== Seeded {len(DEMO_CANDIDATES)} candidates into {settings.database_url} ===")
    for section in directory.highlights():
        print(f"\n{section.label}")
        for member in section.members:
            score = "-" if member.score is None else f"{member.score:g}"
            print(f"  [{score}] {member.nombre}")


if __name__ == "__main__":
    asyncio.run(main())
