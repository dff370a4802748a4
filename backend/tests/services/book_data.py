"""Sample books shared by route and store tests."""

POWER_UP = {
    "isbn": "0691161518",
    "amazon_url": "http://a.co/eobPtX2",
    "author": "Matthew Lane",
    "language": "english",
    "pages": 264,
    "publisher": "Princeton University Press",
    "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
    "year": 2017,
}

ATOMIC_HABITS = {
    "isbn": "0735211299",
    "amazon_url": "https://www.amazon.com/gp/product/0735211299/ref=ewc_pr_img_1?smid=ATVPDKIKX0DER&psc=1",
    "author": "James Clear",
    "language": "english",
    "pages": 320,
    "publisher": "Avery",
    "title": "Atomic Habits: An Easy & Proven Way to Build Good Habits & Break Bad Ones",
    "year": 2018,
}
