"""
Run Output Models
=================

This module defines the output contract of a GridWalk run.

The final position is the only result that matters; the counters are
observability data and never influence the position.

Output Contract:
    {
        "position": {"x": 2, "y": 4},
        "scanner": {
            "frames_decoded": 5,
            "data_frames": 3,
            "ack_frames": 1,
            "nack_frames": 1,
            "empty_data_frames": 0,
            "commands_emitted": 3
        },
        "engine": {
            "commands_ingested": 3,
            "moves_applied": 3,
            "unrecognized_applied": 0,
            "triples_discarded": 0,
            "moves_flushed": 3
        }
    }
"""

from pydantic import BaseModel, ConfigDict, Field

from gridwalk.models.position import Position


class PositionReport(BaseModel):
    """
    Final player position.
    
    Attributes:
        x: Column, 0 is the left edge
        y: Row, 0 is the top edge
    """
    
    x: int = Field(..., ge=0, description="Final column")
    y: int = Field(..., ge=0, description="Final row")
    
    @classmethod
    def from_position(cls, position: Position) -> "PositionReport":
        return cls(x=position.x, y=position.y)


class ScannerReport(BaseModel):
    """Frame scanning counters."""
    
    frames_decoded: int = Field(default=0, ge=0, description="Frames passed to the codec")
    data_frames: int = Field(default=0, ge=0, description="Frames classified as DATA")
    ack_frames: int = Field(default=0, ge=0, description="Supervisory ACK frames skipped")
    nack_frames: int = Field(default=0, ge=0, description="Supervisory NACK frames skipped")
    empty_data_frames: int = Field(
        default=0,
        ge=0,
        description="DATA frames with an empty payload (skipped)",
    )
    commands_emitted: int = Field(default=0, ge=0, description="Commands handed to the engine")


class EngineReport(BaseModel):
    """Move engine counters."""
    
    commands_ingested: int = Field(default=0, ge=0, description="Commands pushed into the delay queue")
    moves_applied: int = Field(default=0, ge=0, description="Commands applied to the position")
    unrecognized_applied: int = Field(
        default=0,
        ge=0,
        description="Applied commands with an unrecognized byte (no-ops)",
    )
    triples_discarded: int = Field(default=0, ge=0, description="Runs of three cleared from the queue")
    moves_flushed: int = Field(default=0, ge=0, description="Commands applied by the end-of-stream flush")


class RunReport(BaseModel):
    """
    Complete result of replaying one transmission.
    
    Attributes:
        position: Final player position
        scanner: Frame scanning counters
        engine: Move engine counters
    """
    
    position: PositionReport = Field(..., description="Final player position")
    scanner: ScannerReport = Field(default_factory=ScannerReport)
    engine: EngineReport = Field(default_factory=EngineReport)
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "position": {"x": 2, "y": 4},
                "scanner": {
                    "frames_decoded": 3,
                    "data_frames": 3,
                    "ack_frames": 0,
                    "nack_frames": 0,
                    "empty_data_frames": 0,
                    "commands_emitted": 3,
                },
                "engine": {
                    "commands_ingested": 3,
                    "moves_applied": 3,
                    "unrecognized_applied": 0,
                    "triples_discarded": 0,
                    "moves_flushed": 3,
                },
            }
        }
    )
