from .fundraiser import CreateFundraiserParams, FundraiserResult

__all__ = ["CreateFundraiserParams", "FundraiserResult"]
