"""
Exchange driver packages.
Each venue implements signer.py + rest.py + driver.py against the FutureSyscalls contract.
"""
