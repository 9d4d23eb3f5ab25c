"""
Standard library API endpoints: standard skills, standard responsibilities
and business processes.

Both item libraries expose the same routes, registered once per library.
"""

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response
from orgstructure.schemas.request import ProcessRequest, StandardItemRequest
from orgstructure.schemas.response import (
    ImportSummary,
    ItemResponse,
    ListResponse,
    MessageResponse,
    Process,
    StandardItem,
)
from orgstructure.services.library_service import (
    StandardItemService,
    process_service,
    standard_responsibility_service,
    standard_skill_service,
)
from orgstructure.services.library_transfer_service import (
    LibraryTransferService,
    responsibility_transfer_service,
    skill_transfer_service,
)
from orgstructure.core.exceptions import AppException
from orgstructure.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


def csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def register_library_routes(
    path: str, service: StandardItemService, transfer: LibraryTransferService
) -> None:
    """Add CRUD, import and export routes for one item library under ``path``."""
    label = service.kind

    @router.get(path, response_model=ListResponse[StandardItem], name=f"list_{label}_items")
    async def list_items():
        try:
            items = await service.list_items()
            return ListResponse[StandardItem](data=items, total=len(items))

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error listing library", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to list {label} items: {str(e)}")

    @router.get(f"{path}/export", name=f"export_{label}_items")
    async def export_items():
        """Download the library as CSV."""
        try:
            content = await transfer.export_csv()
            return csv_response(content, f"{path.strip('/')}.csv")

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error exporting library", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Export failed: {str(e)}")

    @router.post(f"{path}/import", response_model=ItemResponse[ImportSummary], name=f"import_{label}_items")
    async def import_items(file: UploadFile = File(...)):
        """
        Import items from a CSV file with a ``name`` column.

        Returns:
            ItemResponse: Counts of imported and skipped rows
        """
        try:
            content = await file.read()
            summary = await transfer.import_csv(content, file.filename or "upload.csv")
            return ItemResponse[ImportSummary](data=summary)

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error importing library", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Import failed: {str(e)}")

    @router.get(f"{path}/{{item_id}}", response_model=ItemResponse[StandardItem], name=f"get_{label}_item")
    async def get_item(item_id: str):
        try:
            item = await service.get_item(item_id)
            return ItemResponse[StandardItem](data=item)

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error getting library item", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=str(e))

    @router.post(path, response_model=ItemResponse[StandardItem], status_code=201, name=f"create_{label}_item")
    async def create_item(request: StandardItemRequest):
        try:
            item = await service.create_item(request.to_document())
            return ItemResponse[StandardItem](data=item)

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error creating library item", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to create {label} item: {str(e)}")

    @router.put(f"{path}/{{item_id}}", response_model=ItemResponse[StandardItem], name=f"update_{label}_item")
    async def update_item(item_id: str, request: StandardItemRequest):
        try:
            item = await service.update_item(item_id, request.to_document())
            return ItemResponse[StandardItem](data=item)

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error updating library item", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to update {label} item: {str(e)}")

    @router.delete(f"{path}/{{item_id}}", response_model=MessageResponse, name=f"delete_{label}_item")
    async def delete_item(item_id: str):
        try:
            await service.delete_item(item_id)
            return MessageResponse(message=f"Standard {label} deleted")

        except AppException:
            raise
        except Exception as e:
            logger.error("Unexpected error deleting library item", kind=label, error=str(e), exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to delete {label} item: {str(e)}")


register_library_routes("/standard-skills", standard_skill_service, skill_transfer_service)
register_library_routes(
    "/standard-responsibilities", standard_responsibility_service, responsibility_transfer_service
)


@router.get("/processes", response_model=ListResponse[Process])
async def list_processes():
    """List business processes ordered by name."""
    try:
        processes = await process_service.list_items()
        return ListResponse[Process](data=processes, total=len(processes))

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error listing processes", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to list processes: {str(e)}")


@router.get("/processes/{process_id}", response_model=ItemResponse[Process])
async def get_process(process_id: str):
    try:
        process = await process_service.get_item(process_id)
        return ItemResponse[Process](data=process)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error getting process", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/processes", response_model=ItemResponse[Process], status_code=201)
async def create_process(request: ProcessRequest):
    """
    Create a business process.

    Args:
        request: Name, description and at least one responsibility ID
    """
    try:
        process = await process_service.create_item(request.to_document())
        return ItemResponse[Process](data=process)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error creating process", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create process: {str(e)}")


@router.put("/processes/{process_id}", response_model=ItemResponse[Process])
async def update_process(process_id: str, request: ProcessRequest):
    try:
        process = await process_service.update_item(process_id, request.to_document())
        return ItemResponse[Process](data=process)

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error updating process", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update process: {str(e)}")


@router.delete("/processes/{process_id}", response_model=MessageResponse)
async def delete_process(process_id: str):
    try:
        await process_service.delete_item(process_id)
        return MessageResponse(message="Process deleted")

    except AppException:
        raise
    except Exception as e:
        logger.error("Unexpected error deleting process", error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete process: {str(e)}")
