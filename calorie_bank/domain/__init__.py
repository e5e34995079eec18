"""Pure calorie banking and overeating-recovery core."""
