from fastapi import FastAPI, APIRouter, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List
import logging

from config import CORS_ORIGINS, SEED_ON_START, setup_logging
from data_structures import EmptyStructureError
from desk import ServiceDesk
from elements import Element

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI()
api_router = APIRouter(prefix="/api")

# Single desk shared by all requests
service_desk = ServiceDesk()
if SEED_ON_START:
    service_desk.seed()

def get_desk() -> ServiceDesk:
    """Desk used by the routes"""
    return service_desk

# Pydantic Models
class CustomerCreate(BaseModel):
    id: str
    name: str
    reason: str

class RequestCreate(BaseModel):
    id: str
    description: str

class CustomerOut(BaseModel):
    id: str
    name: str
    reason: str

class RequestOut(BaseModel):
    id: str
    description: str
    timestamp: str

class ServeResult(BaseModel):
    customer: CustomerOut
    request: RequestOut

# Helper functions
def customer_out(element: Element) -> CustomerOut:
    return CustomerOut(id=element.id, name=element.primary_text, reason=element.secondary_text)

def request_out(element: Element) -> RequestOut:
    return RequestOut(id=element.id, description=element.primary_text, timestamp=element.secondary_text)

# Queue Routes
@api_router.get("/queue", response_model=List[CustomerOut])
async def get_queue(desk: ServiceDesk = Depends(get_desk)):
    """Waiting customers, front first"""
    return [customer_out(c) for c in desk.queue.iter_front_to_back()]

@api_router.post("/queue", response_model=CustomerOut, status_code=201)
async def add_customer(customer: CustomerCreate, desk: ServiceDesk = Depends(get_desk)):
    """Add customer at the back of the queue"""
    created = desk.add_customer(customer.id, customer.name, customer.reason)
    return customer_out(created)

@api_router.post("/queue/serve", response_model=ServeResult)
async def serve_next(desk: ServiceDesk = Depends(get_desk)):
    """Serve front customer and record it in history"""
    try:
        served, record = desk.serve_next_customer()
    except EmptyStructureError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ServeResult(customer=customer_out(served), request=request_out(record))

# History Routes
@api_router.get("/history", response_model=List[RequestOut])
async def get_history(desk: ServiceDesk = Depends(get_desk)):
    """Request history, most recent first"""
    return [request_out(r) for r in desk.history.iter_top_to_bottom()]

@api_router.post("/history", response_model=RequestOut, status_code=201)
async def add_request(request: RequestCreate, desk: ServiceDesk = Depends(get_desk)):
    """Push new request on history"""
    created = desk.add_request(request.id, request.description)
    return request_out(created)

@api_router.delete("/history/top", response_model=RequestOut)
async def remove_last_request(desk: ServiceDesk = Depends(get_desk)):
    """Pop most recent request"""
    try:
        removed = desk.remove_last_request()
    except EmptyStructureError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return request_out(removed)

# Status
@api_router.get("/status")
async def get_status(desk: ServiceDesk = Depends(get_desk)):
    """Empty/size state of queue and history"""
    return desk.status()

app.include_router(api_router)

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"Service desk API ready: {service_desk.queue.size()} customers waiting")
