"""
Static texts and URL paths used by page objects and assertions.
"""

from typing import Dict


ASSERTION_TEXTS: Dict[str, str] = {
    "LOGIN_FORM_TITLE": "Login to your account",
    "SIGNUP_FORM_TITLE": "New User Signup!",
    "CATEGORY_WOMEN": "Women",
    "CATEGORY_MEN": "Men",
    "CATEGORY_KIDS": "Kids",
    "LOGGED_IN_AS": "Logged in as",
    "ALL_PRODUCTS_TITLE": "All Products",
    "SEARCHED_PRODUCTS": "Searched Products",
    "ACCOUNT_CREATED": "Account Created!",
    "ACCOUNT_DELETED": "Account Deleted!",
    "CART_EMPTY": "Cart is empty!",
    "ADDED": "Added!",
    "SUBSCRIBED": "You have been successfully subscribed!",
    "EMAIL_EXISTS": "Email Address already exist!",
    "LOGIN_ERROR": "Your email or password is incorrect!",
    "REVIEW_THANKS": "Thank you for your review.",
    "CONTACT_SUCCESS": "Success! Your details have been submitted successfully.",
    "ORDER_PLACED": "Order Placed!",
}

URL_PATHS: Dict[str, str] = {
    "HOME": "/",
    "PRODUCTS": "/products",
    "CART": "/view_cart",
    "LOGIN": "/login",
    "LOGOUT": "/logout",
    "SIGNUP": "/signup",
    "CATEGORY_PRODUCTS": "/category_products",
    "BRAND_PRODUCTS": "/brand_products",
    "PRODUCT_DETAILS": "/product_details",
    "CONTACT_US": "/contact_us",
    "CHECKOUT": "/checkout",
    "PAYMENT": "/payment",
    "PAYMENT_DONE": "/payment_done",
    "DELETE_ACCOUNT": "/delete_account",
    "ACCOUNT_CREATED": "/account_created",
}

# Sidebar category -> /category_products/<id>
CATEGORY_IDS: Dict[str, int] = {
    "Women": 1,
    "Men": 3,
    "Kids": 4,
}

# Canonical brand names as they appear in /brand_products/<name>
BRANDS = (
    "Polo",
    "H&M",
    "Madame",
    "Mast & Harbour",
    "Babyhug",
    "Allen Solly Junior",
    "Kookie Kids",
    "Biba",
)

# Lower-case spellings accepted by ProductsPage.filter_by_brand
BRAND_ALIASES: Dict[str, str] = {
    **{brand.lower(): brand for brand in BRANDS},
    "hm": "H&M",
    "mast-harbour": "Mast & Harbour",
    "allen solly": "Allen Solly Junior",
    "allen-solly": "Allen Solly Junior",
    "kookie-kids": "Kookie Kids",
}

# Common viewports used by responsive checks
VIEWPORTS: Dict[str, Dict[str, int]] = {
    "mobile": {"width": 375, "height": 667},
    "tablet": {"width": 768, "height": 1024},
    "desktop": {"width": 1440, "height": 900},
}
