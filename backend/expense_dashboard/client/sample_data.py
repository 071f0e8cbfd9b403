from expense_dashboard.schemas.expense import ExpenseRecord

# shown when the backend cannot be reached
OFFLINE_EXPENSES: tuple[ExpenseRecord, ...] = tuple(
    ExpenseRecord(id=id_, date=day, title=title, category=category, amount=amount)
    for id_, day, title, category, amount in (
        (1, "2023-05-28", "Grocery Shopping", "Groceries", 85.42),
        (2, "2023-05-26", "Restaurant Dinner", "Food & Dining", 64.30),
        (3, "2023-05-25", "Uber Ride", "Transportation", 18.75),
        (4, "2023-05-22", "Movie Tickets", "Entertainment", 32.50),
        (5, "2023-05-20", "Electricity Bill", "Utilities", 95.00),
        (6, "2023-05-18", "Coffee Shop", "Food & Dining", 12.40),
        (7, "2023-05-15", "Gas Station", "Transportation", 45.80),
        (8, "2023-05-12", "Online Shopping", "Shopping", 78.50),
        (9, "2023-05-10", "Phone Bill", "Utilities", 55.00),
        (10, "2023-05-05", "Lunch with Friends", "Food & Dining", 32.80),
    )
)
