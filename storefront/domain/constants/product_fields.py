"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model (MongoDB document and wire names)"""
    NAME = "name"
    DESCRIPTION = "description"
    CATEGORY = "category"
    PRICE = "price"
    NUMBER_IN_STOCK = "numberInStock"
    PRODUCT_IMAGE = "productImage"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
