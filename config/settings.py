"""
Configuration settings - edit values directly here
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings - configure values below"""
    
    # ===================
    # Sui node
    # ===================
    sui_rpc_url: str = "wss://fullnode.mainnet.sui.io:443"
    rpc_timeout: float = 30.0
    
    # ===================
    # Type names
    # ===================
    address_length: int = 32  # bytes; 64 hex chars in a type name
    
    # ===================
    # Deployment (mainnet)
    # ===================
    package_id: str = "0x98c8b10337a98bc3f844253a6075e6db911948880346b989f6650364a09f76f0"
    dispenser: str = "0x3811685776bedf4af159128144edd470e7ba28a3878c6884bfe5c83ee4dda635"
    admin_cap: str = "0x08a57716ed0d4c965e5ae062f370f7a0e637ac4bcb017d26bca1f0013316b029"


# Global settings instance - import this
settings = Settings()
