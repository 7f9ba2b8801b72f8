"""SQL Lab: init-script and documentation generation endpoints.

Invariants:
    - Both endpoints always answer 200; generation failures come back as text
"""

from fastapi import APIRouter, Depends

from recordbook.api.dependencies import get_schema_lab
from recordbook.schemas.state import GeneratedText
from recordbook.services.schema_lab import SchemaLab

router = APIRouter(prefix="/api/v1/lab", tags=["lab"])


@router.post("/sql", response_model=GeneratedText)
async def generate_sql(lab: SchemaLab = Depends(get_schema_lab)):
    return GeneratedText(text=await lab.generate_sql_script())


@router.post("/docs", response_model=GeneratedText)
async def generate_docs(lab: SchemaLab = Depends(get_schema_lab)):
    return GeneratedText(text=await lab.generate_documentation())
